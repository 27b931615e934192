"""
Resource catalog and usage accumulators

Structures owned by a single stage invocation: the catalog of files available
in a resource directory, and the per-page usage sets gathered during the
discovery pass from which global resources are classified.
"""

from pathlib import Path
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set


@dataclass
class ResourceCatalog:
    """
    Mapping from file name to file location for one flat directory

    Attributes:
        kind: Resource category ("partial", "style", "script")
        directory: Directory the catalog was built from
        files: File name → path, in listing order
    """
    kind: str
    directory: Path
    files: Dict[str, Path] = field(default_factory=dict)

    def path_get(self, name: str) -> Optional[Path]:
        """Exact file name lookup"""
        return self.files.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self.files

    def __len__(self) -> int:
        return len(self.files)


@dataclass
class ResourceUsage:
    """
    Discovery pass accumulator for style or script references

    Attributes:
        pageSets: Per-page set of distinct referenced file names, keyed by page
        allReferenced: Every referenced file name, in first-encounter order
        orderMap: Script file name → smallest sort order requested by any page

    Example:
        usage = ResourceUsage()
        usage.page_add("a.html")
        usage.reference_add("a.html", "common.css")
    """
    pageSets: Dict[str, Set[str]] = field(default_factory=dict)
    allReferenced: Dict[str, None] = field(default_factory=dict)
    orderMap: Dict[str, int] = field(default_factory=dict)

    def page_add(self, page: str) -> None:
        """Register a page; a page without references keeps an empty set"""
        self.pageSets.setdefault(page, set())

    def reference_add(self, page: str, name: str) -> None:
        """Record that page references the resource name"""
        self.pageSets.setdefault(page, set()).add(name)
        self.allReferenced.setdefault(name, None)

    def order_add(self, name: str, order: int) -> None:
        """Keep the lowest sort order requested for a script"""
        current = self.orderMap.get(name)
        if current is None or order < current:
            self.orderMap[name] = order

    def globals_compute(self) -> Set[str]:
        """
        Resources referenced by every page

        Plain intersection of all page sets. A page that references nothing
        makes the result empty, even when every other page shares a resource.
        """
        if not self.pageSets:
            return set()
        sets = iter(self.pageSets.values())
        result = set(next(sets))
        for page_set in sets:
            result &= page_set
        return result

    def orderSorted_get(self) -> List[str]:
        """Script names ascending by sort order, ties in first-request order"""
        return sorted(self.orderMap, key=lambda name: self.orderMap[name])
