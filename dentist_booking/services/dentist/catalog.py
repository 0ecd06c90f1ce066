"""
Dentist catalog pipeline: name search, expertise filter, price sort, compare mode.
"""

from typing import Iterable, List, Optional, Union

from ...core.enums import ALL_EXPERTISE, PriceSort
from ...core.models import Dentist

COMPARE_LIMIT = 2


class DentistCatalogPipeline:
    """Filter and sort the loaded dentist list."""

    def __init__(self, dentists: Optional[Iterable[Dentist]] = None):
        self._dentists: List[Dentist] = list(dentists or [])
        self.search: str = ""
        self.expertise: str = ALL_EXPERTISE
        self.price_sort: PriceSort = PriceSort.NONE
        self.compare_mode: bool = False
        self.selected: List[str] = []

    def set_dentists(self, dentists: Iterable[Dentist]) -> None:
        self._dentists = list(dentists)
        if self.expertise not in self.expertise_options():
            self.expertise = ALL_EXPERTISE
        known = {d.id for d in self._dentists}
        self.selected = [did for did in self.selected if did in known]

    def set_search(self, term: Optional[str]) -> None:
        self.search = (term or "").strip()

    def set_expertise(self, expertise: Optional[str]) -> None:
        self.expertise = expertise or ALL_EXPERTISE

    def set_price_sort(self, order: Union[PriceSort, str]) -> None:
        self.price_sort = PriceSort(order)

    def toggle_price_sort(self) -> PriceSort:
        self.price_sort = self.price_sort.toggled()
        return self.price_sort

    def clear_price_sort(self) -> None:
        self.price_sort = PriceSort.NONE

    def expertise_options(self) -> List[str]:
        """The "All" sentinel followed by every tag present in the loaded data."""
        tags = {tag for d in self._dentists for tag in d.area_expertise}
        return [ALL_EXPERTISE] + sorted(tags)

    def view(self) -> List[Dentist]:
        items = self._dentists

        term = self.search.lower()
        if term:
            items = [d for d in items if term in d.name.lower()]

        if self.expertise != ALL_EXPERTISE:
            items = [d for d in items if self.expertise in d.area_expertise]

        if self.price_sort != PriceSort.NONE:
            # sorted() is stable in both directions; ties keep loaded order
            items = sorted(
                items,
                key=lambda d: d.starting_price,
                reverse=self.price_sort == PriceSort.DESC,
            )
        return list(items)

    # Compare mode

    def toggle_compare_mode(self) -> bool:
        """Switch cards between profile links and selection checkboxes."""
        self.compare_mode = not self.compare_mode
        if not self.compare_mode:
            self.selected = []
        return self.compare_mode

    def toggle_selection(self, dentist_id: str) -> bool:
        """Check or uncheck a card; returns the new checked state."""
        if not self.compare_mode:
            return False
        if dentist_id in self.selected:
            self.selected.remove(dentist_id)
            return False
        self.selected.append(dentist_id)
        return True

    @property
    def over_compare_limit(self) -> bool:
        """The UI asks for two dentists but does not enforce it."""
        return len(self.selected) > COMPARE_LIMIT

    def compare_query(self) -> Optional[str]:
        """Query string for the comparison view, once two dentists are picked."""
        if len(self.selected) < COMPARE_LIMIT:
            return None
        return "ids=" + ",".join(self.selected)
