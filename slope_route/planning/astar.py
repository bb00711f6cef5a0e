"""
A* Planner Module
=================

Heuristic-guided best-first search over travel states.

The search is exposed two ways: ``AStarSearch.step()`` advances by one
expansion so callers can impose their own time or progress limits, and
``RoutePlanner.plan()`` wires the terrain components from a Config and
runs a search to completion.
"""

import heapq
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple
from dataclasses import dataclass, field

from ..config import Config
from .state import TravelState
from .expansion import ExpansionPolicy
from .goal import RightEdgeGoal


@dataclass
class PlannerStats:
    """Statistics from a planning run"""
    expansions: int = 0
    generated: int = 0
    pushes: int = 0
    route_length: int = 0
    total_cost: Optional[int] = None
    success: bool = False
    reason: str = ''


class PlanningError(RuntimeError):
    """Search finished without a route"""

    def __init__(self, message: str, stats: Optional[PlannerStats] = None):
        super().__init__(message)
        self.stats = stats


class SearchExhausted(PlanningError):
    """The frontier emptied before any goal state was reached"""


class ExpansionLimitReached(PlanningError):
    """The expansion safety bound was hit before a goal state was reached"""


@dataclass
class Route:
    """
    Ordered states from the start state to a goal state.

    ``edge_costs[i]`` is the cost of the leg ending at ``states[i + 1]``.
    """
    states: List[TravelState]
    total_cost: int
    edge_costs: List[int] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.states)

    def __iter__(self) -> Iterator[TravelState]:
        return iter(self.states)

    def __getitem__(self, index):
        return self.states[index]

    @property
    def start(self) -> TravelState:
        return self.states[0]

    @property
    def end(self) -> TravelState:
        return self.states[-1]

    @property
    def positions(self) -> List[Tuple[int, int]]:
        return [s.position for s in self.states]

    @property
    def num_steps(self) -> int:
        return len(self.states) - 1


class AStarSearch:
    """
    Single A* search invocation.

    Owns its frontier, g-scores and predecessor links; no two searches
    share bookkeeping. Frontier entries are ordered by (g + h, h,
    insertion order), so ties favour states nearer the goal and then
    older entries. A state reached again more cheaply is pushed again,
    even after it was expanded; heap entries whose g no longer matches
    the best known g are skipped when popped.
    """

    def __init__(self,
                 start: TravelState,
                 successors_fn: Callable[[TravelState], Iterable[Tuple[TravelState, int]]],
                 heuristic_fn: Callable[[TravelState], int],
                 goal_fn: Callable[[TravelState], bool],
                 max_expansions: Optional[int] = None):
        self.start = start
        self.successors_fn = successors_fn
        self.heuristic_fn = heuristic_fn
        self.goal_fn = goal_fn
        self.max_expansions = max_expansions

        self.stats = PlannerStats()
        self.g_score: Dict[TravelState, int] = {start: 0}
        self.came_from: Dict[TravelState, TravelState] = {}
        self.edge_into: Dict[TravelState, int] = {}
        self.route: Optional[Route] = None

        self._open: List[Tuple[int, int, int, int, TravelState]] = []
        self._counter = 0
        self._push(0, start)

    def _push(self, g: int, state: TravelState):
        h = self.heuristic_fn(state)
        heapq.heappush(self._open, (g + h, h, self._counter, g, state))
        self._counter += 1
        self.stats.pushes += 1

    def _pop(self) -> Optional[TravelState]:
        """Next frontier state, skipping stale entries"""
        while self._open:
            _, _, _, g, state = heapq.heappop(self._open)
            if g == self.g_score[state]:
                return state
        return None

    @property
    def frontier_size(self) -> int:
        return len(self._open)

    @property
    def done(self) -> bool:
        return self.route is not None

    def step(self) -> Optional[Route]:
        """
        Expand one frontier state.

        Returns:
            The route once a goal state is dequeued, otherwise None

        Raises:
            SearchExhausted: the frontier is empty
            ExpansionLimitReached: max_expansions states were expanded
        """
        if self.route is not None:
            return self.route

        current = self._pop()
        if current is None:
            self.stats.reason = 'no_path_found'
            raise SearchExhausted(
                f'frontier exhausted after {self.stats.expansions} expansions', self.stats
            )

        if self.goal_fn(current):
            self.route = self._reconstruct_route(current)
            self.stats.route_length = len(self.route)
            self.stats.total_cost = self.route.total_cost
            self.stats.success = True
            self.stats.reason = 'success'
            return self.route

        if self.max_expansions is not None and self.stats.expansions >= self.max_expansions:
            self.stats.reason = 'max_expansions'
            raise ExpansionLimitReached(
                f'no route within {self.max_expansions} expansions', self.stats
            )

        self.stats.expansions += 1
        g_current = self.g_score[current]

        for neighbor, cost in self.successors_fn(current):
            self.stats.generated += 1
            tentative_g = g_current + cost
            old = self.g_score.get(neighbor)
            if old is None or tentative_g < old:
                self.came_from[neighbor] = current
                self.g_score[neighbor] = tentative_g
                self.edge_into[neighbor] = cost
                self._push(tentative_g, neighbor)

        return None

    def run(self) -> Route:
        """Step until a route is found or the search fails"""
        route = None
        while route is None:
            route = self.step()
        return route

    def _reconstruct_route(self, goal: TravelState) -> Route:
        """Follow predecessor links back to the start"""
        states = [goal]
        costs = []
        current = goal
        while current in self.came_from:
            costs.append(self.edge_into[current])
            current = self.came_from[current]
            states.append(current)
        states.reverse()
        costs.reverse()
        return Route(states=states, total_cost=self.g_score[goal], edge_costs=costs)


class RoutePlanner:
    """
    Plans the minimum-slope crossing of the canvas from left to right.

    Usage:
        planner = RoutePlanner(HeightField(config.terrain), config)
        route = planner.plan()
    """

    def __init__(self, height_field, config: Optional[Config] = None):
        """
        Args:
            height_field: Any object with ``elevation(x, y) -> float``
            config: Configuration object
        """
        self.config = config or Config()
        self.height_field = height_field
        self.expansion = ExpansionPolicy(height_field, self.config)
        self.goal = RightEdgeGoal.from_config(self.config)
        self.max_expansions = self.config.search.max_expansions

        # Last planning stats
        self.last_stats: Optional[PlannerStats] = None

    def start_state(self, position: Optional[Tuple[int, int]] = None) -> TravelState:
        return self.expansion.start_state(position)

    def search(self, start: Optional[TravelState] = None) -> AStarSearch:
        """Fresh search from ``start`` (the configured entry point by default)"""
        if start is None:
            start = self.start_state()
        return AStarSearch(
            start,
            self.expansion.successors,
            self.goal.heuristic,
            self.goal.is_goal,
            max_expansions=self.max_expansions,
        )

    def plan(self, start: Optional[TravelState] = None) -> Route:
        """
        Find the minimum-cost route.

        Raises:
            SearchExhausted: no goal state is reachable
            ExpansionLimitReached: the configured expansion bound was hit
        """
        search = self.search(start)
        try:
            return search.run()
        finally:
            self.last_stats = search.stats
