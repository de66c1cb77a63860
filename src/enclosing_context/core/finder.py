import logging
from collections.abc import Collection, Iterable

from enclosing_context.core.ports.parser import ParseBackend
from enclosing_context.errors import ContextError
from enclosing_context.models import EnclosingContext, LineRange, SearchMode, SyntaxNode

logger = logging.getLogger(__name__)


def select_enclosing_node(
    nodes: Iterable[SyntaxNode],
    line_range: LineRange,
    mode: SearchMode = SearchMode.LARGEST,
    kinds: Collection[str] | None = None,
) -> SyntaxNode | None:
    """Reduce ``nodes`` to the widest (or narrowest) one containing ``line_range``.

    Nodes without a line span are skipped. Among equal widths the node met
    first wins, so with pre-order input the outermost of a tie is returned.
    """
    if line_range.is_empty:
        return None

    best: SyntaxNode | None = None
    best_width = 0
    for node in nodes:
        if not node.contains(line_range):
            continue
        if kinds is not None and node.kind not in kinds:
            continue
        width = node.width
        if best is None:
            best, best_width = node, width
        elif mode is SearchMode.LARGEST and width > best_width:
            best, best_width = node, width
        elif mode is SearchMode.SMALLEST and width < best_width:
            best, best_width = node, width
    return best


def find_enclosing_context(
    source: str,
    line_range: LineRange,
    backend: ParseBackend,
    mode: SearchMode = SearchMode.LARGEST,
    kinds: Collection[str] | None = None,
) -> EnclosingContext | None:
    if line_range.is_empty:
        return None

    try:
        nodes = backend.parse(source)
    except ContextError as exc:
        logger.warning("Error parsing Python file with %s backend: %s", backend.name, exc)
        return None

    node = select_enclosing_node(nodes, line_range, mode, kinds)
    return EnclosingContext.from_node(node) if node is not None else None
