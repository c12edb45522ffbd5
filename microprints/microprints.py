"""Vowel/consonant-cluster graphs built from text samples, with reports."""

from __future__ import annotations

import math
import random
from bisect import bisect_left
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

from .charstar import column, super_chomp
from .tree import BinarySearchTree

SPECIAL_CHARS = ",.<>;':\"[]{}/?`~!@#$%^&*()_=+|\\"
VOWELS = "euioa"
STEPS = 20

_CSS = (
    "table{"
    "font-size:18pt; font-family: arial,verdana;"
    "text-align:right;}"
    "#break{padding-top:50px;}"
)
_END = "end"


def is_special_char(c: str) -> bool:
    """Return True for a punctuation character from the special set."""
    return len(c) == 1 and c in SPECIAL_CHARS


def remove_appended_special_chars(text: str) -> str:
    """Cut text at its first special character."""
    for i, ch in enumerate(text):
        if is_special_char(ch):
            return text[:i]
    return text


def is_vowel(c: str) -> bool:
    """Return True for one of the lowercase vowels."""
    return len(c) == 1 and c in VOWELS


def vowel_index(vowel: str) -> int:
    """Return the graph row of a vowel, or -1 for anything else."""
    if not is_vowel(vowel):
        return -1
    return VOWELS.index(vowel)


def vowel_at(index: int) -> str:
    """Return the vowel of a graph row, or an empty string if out of range."""
    if 0 <= index < len(VOWELS):
        return VOWELS[index]
    return ""


def end_of_file(line: str) -> bool:
    """Return True when line marks the end of a data file.

    Empty lines, lines starting with a line break, and lines whose start
    agrees with the word 'end' all count as the end marker.
    """
    if not line or line[0] in "\r\n":
        return True
    return _END.startswith(line[: len(_END)])


def _read_until_end(path: str | Path) -> Iterator[str]:
    with open(path, encoding="utf-8", newline="") as fh:
        for line in fh:
            if end_of_file(line):
                return
            yield line


def _edges_of(line: str) -> Iterator[tuple[str, str]]:
    """Yield (vowel, cluster) pairs; the character ending a cluster is skipped."""
    n = len(line)
    i = 0
    while i < n:
        ch = line[i]
        if not is_vowel(ch):
            i += 1
            continue
        j = i + 1
        while j < n and line[j] not in "\r\n " and not is_vowel(line[j]):
            j += 1
        chunk = line[i + 1:j]
        if chunk:
            yield ch, chunk
        i = j + 1


def prep_edges(src_path: str | Path, edges_path: str | Path) -> None:
    """Write one 'vowel cluster' line per edge found in the source text."""
    with open(edges_path, "w", encoding="utf-8") as out:
        for line in _read_until_end(src_path):
            for vowel, chunk in _edges_of(line):
                out.write(f"{vowel} {chunk}\n")
        out.write(_END)


def write_vertices(edges_path: str | Path, table_path: str | Path) -> None:
    """Write the sorted, distinct clusters of an edges file, one per line."""
    tree = BinarySearchTree()
    for line in _read_until_end(edges_path):
        key = column(line, 1)
        if key:
            tree.insert(key)
    with open(table_path, "w", encoding="utf-8") as out:
        out.writelines(f"{key}\n" for key in tree.keys())
        out.write(_END)


def _divide(num: float, den: float) -> float:
    if den:
        return num / den
    if num:
        return math.copysign(math.inf, num)
    return math.nan


@dataclass
class AdjacencyGraph:
    """A dense matrix of integer edge weights."""

    rows: int
    cols: int
    cells: list[list[int]] = field(init=False)

    def __post_init__(self) -> None:
        self.cells = [[0] * self.cols for _ in range(self.rows)]

    def insert(self, y: int, x: int, weight: int) -> None:
        """Set the weight of the edge at row y, column x."""
        self.cells[y][x] = weight

    def render(self) -> str:
        """Return the matrix as space-terminated numbers, one row per line."""
        return "".join(
            "".join(f"{value} " for value in row) + "\n" for row in self.cells
        )

    def save(self, path: str | Path) -> None:
        """Write the rendered matrix to path."""
        Path(path).write_text(self.render(), encoding="utf-8")

    def density(self) -> float:
        """Return the ratio of non-zero to zero cells."""
        values = [value for row in self.cells for value in row]
        non_zero = sum(1 for value in values if value != 0)
        return _divide(non_zero, len(values) - non_zero)

    def average(self) -> float:
        """Return the mean of the non-zero cells."""
        values = [value for row in self.cells for value in row if value != 0]
        return _divide(sum(values), len(values))


@dataclass
class GraphStringTable:
    """A vowel-by-cluster graph with the sorted table of cluster names."""

    graph: AdjacencyGraph
    table: list[str]

    @classmethod
    def from_files(
        cls, edges_path: str | Path, vertices_path: str | Path
    ) -> GraphStringTable:
        """Build the table from a vertices file and count edges from an edges file."""
        table = [super_chomp(line) for line in _read_until_end(vertices_path)]
        gst = cls(AdjacencyGraph(len(VOWELS), len(table)), table)
        for line in _read_until_end(edges_path):
            row = vowel_index(column(line, 0)[:1])
            col = gst.lookup(column(line, 1))
            if row >= 0 and col >= 0:
                gst.graph.cells[row][col] += 1
        return gst

    def lookup(self, item: str) -> int:
        """Return the index of item in the sorted table, or -1."""
        i = bisect_left(self.table, item)
        if i < len(self.table) and self.table[i] == item:
            return i
        return -1

    def maximum_edge_y(self, vertex: str) -> int:
        """Return the vowel row with the heaviest edge to a cluster."""
        col = self.lookup(vertex)
        if col < 0:
            raise KeyError(vertex)
        best, pos = 0, 0
        for i, row in enumerate(self.graph.cells):
            if best < row[col]:
                best, pos = row[col], i
        return pos

    def maximum_edge_x(self, vowel: str) -> int:
        """Return the cluster column with the heaviest edge from a vowel."""
        row = vowel_index(vowel)
        if row < 0:
            raise KeyError(vowel)
        best, pos = 0, 0
        for i, value in enumerate(self.graph.cells[row]):
            if best < value:
                best, pos = value, i
        return pos


@dataclass
class SimilarityResult:
    """Edge weight ratios shared by two profiles."""

    edges: list[tuple[str, str, float]]
    average: float
    non_similar_average: float


@dataclass
class Profile:
    """A named text sample and the graph built from it."""

    name: str = ""
    data_path: str = ""
    freq: str = ""
    gst: GraphStringTable | None = None

    @classmethod
    def load(cls, path: str | Path) -> Profile:
        """Read 'key=value' lines (name, data, freq) until the end marker."""
        profile = cls()
        with open(path, encoding="utf-8", newline="") as fh:
            for raw in fh:
                line = super_chomp(raw)
                if end_of_file(line):
                    break
                key, _, value = line.partition("=")
                if key == "name":
                    profile.name = value
                elif key == "data":
                    profile.data_path = value
                elif key == "freq":
                    profile.freq = value
        return profile

    def _paths(self, directory: str | Path) -> tuple[Path, Path, Path]:
        if not self.name:
            raise ValueError("profile has no name")
        base = Path(directory)
        return (
            base / f"tmp_edge.{self.name}",
            base / f"vert_tbl.{self.name}",
            base / f"graph.{self.name}",
        )

    def table(self) -> GraphStringTable:
        if self.gst is None:
            raise ValueError(f"profile {self.name!r} has not been processed")
        return self.gst

    def process(self, directory: str | Path = ".") -> GraphStringTable:
        """Build edges, vertices and graph files from the data file."""
        if not self.data_path:
            raise ValueError(f"profile {self.name!r} has no data path")
        edges, vertices, graph = self._paths(directory)
        prep_edges(self.data_path, edges)
        write_vertices(edges, vertices)
        self.gst = GraphStringTable.from_files(edges, vertices)
        self.gst.graph.save(graph)
        return self.gst

    def post_process(self, directory: str | Path = ".") -> GraphStringTable:
        """Rebuild the graph from files left by an earlier process()."""
        edges, vertices, _ = self._paths(directory)
        self.gst = GraphStringTable.from_files(edges, vertices)
        return self.gst

    def report(self, path: str | Path) -> None:
        """Write an HTML table of the graph with its density and average."""
        gst = self.table()
        parts = [f"<style>{_CSS}</style>", "<table>\n", "<th>\n"]
        parts.extend(f"<td>{name}</td>" for name in gst.table)
        parts.append("</th>\n")
        for vowel, row in zip(VOWELS, gst.graph.cells):
            parts.append(f"<tr><th>{vowel}</th>")
            parts.extend(f"<td>{value}</td>" for value in row)
            parts.append("</tr>\n")
        parts.append("</table>\n")
        parts.append('<div id="break"></div>\n')
        parts.append("<table>\n")
        parts.append(
            f"<tr><th>Density</th><td>{gst.graph.density():f}</td></tr>\n"
        )
        parts.append(
            f"<tr><th>Average</th><td>{gst.graph.average():f}</td></tr>\n"
        )
        parts.append("</table>\n")
        Path(path).write_text("".join(parts), encoding="utf-8")

    def clear(self, directory: str | Path = ".") -> None:
        """Delete the intermediate and graph files of this profile."""
        for path in self._paths(directory):
            path.unlink(missing_ok=True)


def dual(a: Profile, b: Profile, words: Iterable[str]) -> list[str]:
    """Generate a word for each starting cluster by walking two graphs.

    Steps alternate between picking the heaviest vowel for the current
    cluster and the heaviest cluster for the current vowel; the profiles
    swap roles every third step. Stops at the end marker.
    """
    results: list[str] = []
    use_vowel = True
    step = 0
    vowel = ""
    for word in words:
        if end_of_file(word):
            break
        cluster = word
        out: list[str] = []
        for _ in range(STEPS):
            if use_vowel:
                vowel = vowel_at(a.table().maximum_edge_y(cluster))
                out.append(vowel)
            else:
                gst = b.table()
                cluster = gst.table[gst.maximum_edge_x(vowel)]
                out.append(cluster)
            if step % 3 == 0:
                a, b = b, a
            step += 1
            use_vowel = not use_vowel
        results.append("".join(out))
    return results


def random_select(profile: Profile, rng: random.Random | None = None) -> str:
    """Return twenty random vowel-and-cluster pairs joined together."""
    rng = rng if rng is not None else random.Random()
    table = profile.table().table
    return "".join(
        vowel_at(rng.randrange(len(VOWELS))) + table[rng.randrange(len(table))]
        for _ in range(STEPS)
    )


def similarity(a: Profile, b: Profile) -> SimilarityResult:
    """Compare edge weights of the clusters two profiles share."""
    ga, gb = a.table(), b.table()
    edges: list[tuple[str, str, float]] = []
    total = 0.0
    count = 0
    ns_total = 0.0
    ns_count = 0
    for vertex in ga.table:
        col_b = gb.lookup(vertex)
        if col_b < 0:
            continue
        col_a = ga.lookup(vertex)
        for vowel, row_a, row_b in zip(VOWELS, ga.graph.cells, gb.graph.cells):
            wa, wb = row_a[col_a], row_b[col_b]
            if wa == 0 or wb == 0:
                continue
            ratio = wa / wb
            if ratio >= 10000.0:
                continue
            total += ratio
            count += 1
            if not 0.5 < ratio < 1.5:
                ns_total += ratio
                ns_count += 1
            edges.append((vertex, vowel, ratio))
    return SimilarityResult(
        edges, _divide(total, count), _divide(ns_total, ns_count)
    )