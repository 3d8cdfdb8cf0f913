"""View synchronizer: owns session state and recomputes the filtered view."""

import logging
from typing import Callable, Optional, Sequence

from candidate_portal.filtering.predicates import FilterParams, apply
from candidate_portal.filtering.selection import SkillSelection
from candidate_portal.filtering.suggestions import suggest
from candidate_portal.records.models import Record
from candidate_portal.storage.dataset import DatasetLoadError, DatasetStore, load_dataset

logger = logging.getLogger("candidate_portal.view")

Renderer = Callable[[Sequence[Record], int], None]


class ViewSynchronizer:
    """Single owner of the dataset, skill selection and filter parameters.

    Every state-changing method ends with ``recompute()`` so the rendered
    subset never lags the state by more than one action.
    """

    def __init__(
        self,
        renderer: Optional[Renderer] = None,
        defaults: Optional[FilterParams] = None,
        store: Optional[DatasetStore] = None,
    ):
        self.renderer = renderer
        self.defaults = defaults or FilterParams()
        self.store = store or DatasetStore.empty()
        self.selection = SkillSelection()
        self.params = self.defaults
        self.current: list[Record] = []

    def recompute(self) -> list[Record]:
        """Filter the full dataset with the current state and emit it."""
        self.current = apply(self.store.records, self.selection, self.params)
        logger.debug(
            "Recomputed view: %d/%d records (skills=%s, params=%s)",
            len(self.current), len(self.store), self.selection.to_display_list(), self.params,
        )
        if self.renderer is not None:
            self.renderer(self.current, len(self.current))
        return self.current

    def load(self, source: str, timeout: int = 30) -> bool:
        """Load the dataset; on failure log it and keep the previous state."""
        try:
            store = load_dataset(source, timeout=timeout)
        except DatasetLoadError as e:
            logger.error("Critical Error: Unable to load candidate data from %s: %s", source, e)
            return False

        self.store = store
        self.reset()
        return True

    def update_params(self, **raw) -> list[Record]:
        """Set any subset of filter parameters from raw input values."""
        self.params = FilterParams.from_inputs(self.params, **raw)
        return self.recompute()

    def add_skill(self, skill: str) -> list[Record]:
        if self.selection.add(skill):
            logger.info("Skill filter added: %s", skill)
        return self.recompute()

    def remove_skill(self, skill: str) -> list[Record]:
        if self.selection.remove(skill):
            logger.info("Skill filter removed: %s", skill)
        return self.recompute()

    def suggest(self, query: str, limit: Optional[int] = None) -> list[str]:
        return suggest(query, self.selection, self.store.all_skills, limit=limit)

    def reset(self) -> list[Record]:
        """Restore default parameters, clear selected skills, recompute."""
        self.params = self.defaults
        self.selection.clear()
        return self.recompute()

    def detail(self, record_id: int) -> Optional[Record]:
        return self.store.get(record_id)
