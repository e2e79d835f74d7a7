"""
Load graphs from files.

Supported formats:

- **PACE** (``.gr``): ``c`` comments, one ``p <fmt> <n> <m>`` header,
  then one 1-indexed ``u v`` pair per line.
- **DIMACS** (``.col``, ``.dimacs``): ``c`` comments, ``p edge <n> <m>``,
  then ``e u v`` lines, 1-indexed.
- **JSON** (``.json``): a single instance dict or a list of them, each
  with ``nodes`` and ``edges`` keys.

Malformed text is rejected with :class:`GraphFormatError`; nothing is
skipped silently.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any

from vertexga.exceptions import GraphFormatError
from vertexga.graph import Graph

logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────────────────────
# Parsers: raw text to Graph
# ──────────────────────────────────────────────────────────────

def _parse_vertex(token: str, n_nodes: int, lineno: int) -> int:
    try:
        vertex = int(token)
    except ValueError:
        raise GraphFormatError(f"Line {lineno}: invalid vertex {token!r}") from None
    if not 1 <= vertex <= n_nodes:
        raise GraphFormatError(
            f"Line {lineno}: vertex {vertex} outside 1..{n_nodes}"
        )
    # 1-indexed → 0-indexed
    return vertex - 1


def _parse_header(parts: list[str], lineno: int) -> tuple[int, int]:
    if len(parts) != 4:
        raise GraphFormatError(f"Line {lineno}: malformed header {' '.join(parts)!r}")
    try:
        return int(parts[2]), int(parts[3])
    except ValueError:
        raise GraphFormatError(f"Line {lineno}: non-integer counts in header") from None


def _check_edge_count(edges: list, expected: int) -> None:
    if len(edges) != expected:
        raise GraphFormatError(
            f"Header declares {expected} edges but {len(edges)} were read"
        )


def parse_pace(text: str, name: str = "pace") -> Graph:
    """
    Parse the PACE graph format.

    Format::

        c comment line
        p td <n_nodes> <n_edges>
        <u> <v>            (1-indexed)
    """
    header: tuple[int, int] | None = None
    edges: list[tuple[int, int]] = []

    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line or line.startswith("c"):
            continue

        parts = line.split()

        if parts[0] == "p":
            if header is not None:
                raise GraphFormatError(f"Line {lineno}: duplicate header")
            header = _parse_header(parts, lineno)
            continue

        if header is None:
            raise GraphFormatError(f"Line {lineno}: edge before 'p' header")
        if len(parts) != 2:
            raise GraphFormatError(f"Line {lineno}: expected 2 vertices, got {line!r}")
        n_nodes = header[0]
        edges.append((
            _parse_vertex(parts[0], n_nodes, lineno),
            _parse_vertex(parts[1], n_nodes, lineno),
        ))

    if header is None:
        raise GraphFormatError("Missing 'p' header line")
    _check_edge_count(edges, header[1])

    return Graph(
        header[0],
        edges,
        name=name,
        metadata={"generator": "pace", "size": header[0], "params": {"format": "pace"}},
    )


def parse_dimacs(text: str, name: str = "dimacs") -> Graph:
    """
    Parse the DIMACS graph format.

    Format::

        c comment line
        p edge <n_nodes> <n_edges>
        e <u> <v>            (1-indexed)
    """
    header: tuple[int, int] | None = None
    edges: list[tuple[int, int]] = []

    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line or line.startswith("c"):
            continue

        parts = line.split()

        if parts[0] == "p":
            if header is not None:
                raise GraphFormatError(f"Line {lineno}: duplicate header")
            header = _parse_header(parts, lineno)
            continue

        if parts[0] != "e":
            raise GraphFormatError(f"Line {lineno}: unknown line type {parts[0]!r}")
        if header is None:
            raise GraphFormatError(f"Line {lineno}: edge before 'p' header")
        if len(parts) < 3:
            raise GraphFormatError(f"Line {lineno}: expected 'e u v', got {line!r}")
        edges.append((
            _parse_vertex(parts[1], header[0], lineno),
            _parse_vertex(parts[2], header[0], lineno),
        ))

    if header is None:
        raise GraphFormatError("Missing 'p' header line")
    _check_edge_count(edges, header[1])

    return Graph(
        header[0],
        edges,
        name=name,
        metadata={"generator": "dimacs", "size": header[0], "params": {"format": "dimacs"}},
    )


# ──────────────────────────────────────────────────────────────
# JSON instances
# ──────────────────────────────────────────────────────────────

def load_instances(path: str) -> list[dict[str, Any]]:
    """
    Load graph instances from a JSON file.

    The file may contain either:
    - A single instance dict (with ``nodes`` and ``edges``)
    - A list of instance dicts

    Raises
    ------
    FileNotFoundError
        If the file doesn't exist.
    GraphFormatError
        If the JSON structure is invalid.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Instance file not found: {path}")

    with open(path) as f:
        data = json.load(f)

    # Normalize to list
    if isinstance(data, dict):
        instances = [data]
    elif isinstance(data, list):
        instances = data
    else:
        raise GraphFormatError(
            f"Expected a JSON object or array, got {type(data).__name__}"
        )

    validated = []
    for i, inst in enumerate(instances):
        if not isinstance(inst, dict):
            raise GraphFormatError(f"Instance {i} is not a dict: {type(inst).__name__}")

        for key in ("nodes", "edges"):
            if key not in inst:
                raise GraphFormatError(
                    f"Instance {i} missing required '{key}' key. "
                    f"Expected format: {{\"nodes\": [...], \"edges\": [...]}}"
                )

        if "metadata" not in inst:
            inst["metadata"] = {
                "generator": "custom",
                "size": len(inst["nodes"]),
                "params": {},
            }

        if "instance_name" not in inst:
            inst["instance_name"] = f"custom_{i}"

        validated.append(inst)

    return validated


# ──────────────────────────────────────────────────────────────
# Dispatch
# ──────────────────────────────────────────────────────────────

def load_graphs(path: str) -> list[Graph]:
    """Load every graph in *path*, choosing the parser by extension."""
    if not os.path.exists(path):
        raise FileNotFoundError(f"Graph file not found: {path}")

    stem, ext = os.path.splitext(os.path.basename(path))
    ext = ext.lower()

    if ext == ".json":
        graphs = [Graph.from_instance(inst) for inst in load_instances(path)]
    else:
        with open(path) as f:
            text = f.read()
        if ext in (".col", ".dimacs"):
            graphs = [parse_dimacs(text, name=stem)]
        else:
            graphs = [parse_pace(text, name=stem)]

    for graph in graphs:
        logger.info("Loaded %r from %s", graph, path)
    return graphs


def load_graph(path: str) -> Graph:
    """Load a single graph; JSON files must hold exactly one instance."""
    graphs = load_graphs(path)
    if len(graphs) != 1:
        raise GraphFormatError(f"{path} holds {len(graphs)} instances, expected 1")
    return graphs[0]
