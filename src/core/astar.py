from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional
import time

from core.configuration import Configuration, validate_configuration
from core.graph.base import BoardGraph
from core.move import Move
from core.search_node import SearchNode

from strategies.generators.base import MoveGenerator
from strategies.generators.burrow_moves import BurrowMoveGenerator
from strategies.heuristics.base import Heuristic
from strategies.heuristics.room_entrance import RoomEntranceHeuristic
from strategies.open_policy.base import OpenPolicy
from strategies.open_policy.priority import PriorityOpen


class SearchStatus(Enum):
    SOLVED = "solved"
    UNSOLVABLE = "unsolvable"
    ABORTED = "aborted"  # исчерпан лимит итераций


@dataclass
class SearchResult:
    status: SearchStatus
    cost: Optional[int] = None
    path: List[Configuration] = field(default_factory=list)
    moves: List[Move] = field(default_factory=list)
    expansions: int = 0

    @property
    def solved(self) -> bool:
        return self.status is SearchStatus.SOLVED


@dataclass
class BurrowAStar:
    """
    A*-поиск минимальной энергии для расстановки амфиподов по комнатам.

    Параметры:
        graph        : BoardGraph     — геометрия норы
        start        : Configuration  — начальная конфигурация
        generator    : MoveGenerator  — генератор допустимых ходов
        heuristic    : Heuristic      — допустимая нижняя оценка
        open_policy  : OpenPolicy     — Open с полным порядком узлов
        reopen       : bool           — хранить лучшую g для каждой конфигурации
                                        и переоткрывать её при удешевлении.
                                        False → каждая конфигурация попадает
                                        в Open не более одного раза.

    Главный метод:
        run() -> SearchResult
    """

    graph: BoardGraph
    start: Configuration
    generator: MoveGenerator
    heuristic: Heuristic
    open_policy: OpenPolicy
    reopen: bool = True

    def __post_init__(self):
        validate_configuration(self.start, self.graph)

        # лучшая известная g для каждой конфигурации, попавшей в Open (Seen)
        self._best_cost: Dict[Configuration, int] = {}
        self._result: Optional[SearchResult] = None
        self._metrics = {
            'expansions': 0,
            'nodes_created': 1,  # root
            'duplicates_skipped': 0,
            'reopened_nodes': 0,
            'stale_pops': 0,
            'max_open_size': 1,
            'runtime_seconds': 0.0,
        }

        root = SearchNode(
            config=self.start,
            accumulated_cost=0,
            estimated_total_cost=self.heuristic.lower_bound_cost(self.start, self.graph),
            parent=None,
        )
        self._best_cost[self.start] = 0
        self.open_policy.push(root)

    # ------------------------------------------------------------
    # Публичный интерфейс
    # ------------------------------------------------------------
    @property
    def result(self) -> Optional[SearchResult]:
        return self._result

    def step(self) -> bool:
        """
        Один цикл pop / expand / push.

        Возвращает True, если поиск можно продолжать; после False
        итог лежит в self.result.
        """
        if self._result is not None:
            return False

        if self.open_policy.empty():
            self._result = SearchResult(
                status=SearchStatus.UNSOLVABLE,
                expansions=self._metrics['expansions'],
            )
            return False

        node = self.open_policy.pop()

        if node.accumulated_cost > self._best_cost[node.config]:
            # устаревшая запись: до этой конфигурации уже нашли путь дешевле
            self._metrics['stale_pops'] += 1
            return True

        if node.config.is_solved():
            self._result = SearchResult(
                status=SearchStatus.SOLVED,
                cost=node.accumulated_cost,
                path=node.reconstruct_path(),
                moves=node.reconstruct_moves(),
                expansions=self._metrics['expansions'],
            )
            return False

        self._metrics['expansions'] += 1
        for move, new_config in self.generator.successors(node.config, self.graph):
            cost = node.accumulated_cost + move.cost

            known = self._best_cost.get(new_config)
            if known is not None:
                if not self.reopen or known <= cost:
                    self._metrics['duplicates_skipped'] += 1
                    continue
                self._metrics['reopened_nodes'] += 1

            self._best_cost[new_config] = cost
            child = SearchNode(
                config=new_config,
                accumulated_cost=cost,
                estimated_total_cost=cost + self.heuristic.lower_bound_cost(new_config, self.graph),
                parent=node,
                move=move,
            )
            self.open_policy.push(child)
            self._metrics['nodes_created'] += 1

        self._metrics['max_open_size'] = max(self._metrics['max_open_size'], len(self.open_policy))
        return True

    def run(self, max_iterations: Optional[int] = None, verbose: bool = False) -> SearchResult:
        """
        Запустить A*.

        max_iterations ограничивает число раскрытых узлов; при исчерпании
        лимита возвращается ABORTED (это не то же самое, что UNSOLVABLE).
        """
        start_time = time.time()
        last_report = 0
        try:
            while self._result is None:
                if max_iterations is not None and self._metrics['expansions'] >= max_iterations:
                    if verbose:
                        print(f"\n⚠️  Лимит {max_iterations} раскрытий исчерпан")
                    return SearchResult(
                        status=SearchStatus.ABORTED,
                        expansions=self._metrics['expansions'],
                    )

                self.step()

                expansions = self._metrics['expansions']
                if verbose and expansions - last_report >= 10000:
                    last_report = expansions
                    top = self.open_policy.peek() if not self.open_policy.empty() else None
                    bound = top.estimated_total_cost if top is not None else "-"
                    print(f"  Раскрыто {self._metrics['expansions']}: "
                          f"Open={len(self.open_policy)}, f_min={bound}")
        finally:
            self._metrics['runtime_seconds'] += time.time() - start_time

        if verbose:
            if self._result.solved:
                print(f"\n✓ Решение найдено: энергия {self._result.cost}, "
                      f"ходов {len(self._result.moves)}")
            else:
                print(f"\n⚠️  Open пуст после {self._metrics['expansions']} раскрытий")
        return self._result

    def get_statistics(self) -> dict:
        stats = dict(self._metrics)
        stats['seen_configurations'] = len(self._best_cost)
        stats['open_size'] = len(self.open_policy)
        return stats


def solve_burrow(
    start: Configuration,
    graph: BoardGraph,
    reopen: bool = True,
    max_iterations: Optional[int] = None,
    verbose: bool = False,
) -> SearchResult:
    """Запуск со стандартными стратегиями (ходы норы, вход в комнату, куча)."""
    solver = BurrowAStar(
        graph=graph,
        start=start,
        generator=BurrowMoveGenerator(),
        heuristic=RoomEntranceHeuristic(),
        open_policy=PriorityOpen(),
        reopen=reopen,
    )
    return solver.run(max_iterations=max_iterations, verbose=verbose)
