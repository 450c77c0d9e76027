"""CLI entry point for wdgraph."""

import logging
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from enum import Enum
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from wdgraph.config import get_log_level
from wdgraph.core.exceptions import GraphError, NodeNotFoundError
from wdgraph.core.graph import Graph
from wdgraph.core.models import EdgeView

app = typer.Typer(
    name="wdgraph",
    help="Build and inspect weighted directed graphs.",
    no_args_is_help=True,
)
console = Console()


class WeightType(str, Enum):
    """How the WEIGHT part of an edge token is parsed."""

    INT = "int"
    FLOAT = "float"
    STR = "str"


_WEIGHT_PARSERS = {
    WeightType.INT: int,
    WeightType.FLOAT: float,
    WeightType.STR: str,
}

EdgesArg = Annotated[
    list[str] | None, typer.Argument(help="Edges as SRC:DST:WEIGHT tokens")
]
NodesOpt = Annotated[
    list[str] | None, typer.Option("--node", "-n", help="Extra node to insert (repeatable)")
]
WeightOpt = Annotated[
    WeightType, typer.Option("--weight-type", "-w", help="Weight type: int, float, str")
]


def parse_edge(token: str, weight_type: WeightType) -> tuple[str, str, Any]:
    """Parse a SRC:DST:WEIGHT token."""
    parts = token.split(":")
    if len(parts) != 3 or not parts[0] or not parts[1]:
        raise typer.BadParameter(f"Expected SRC:DST:WEIGHT, got '{token}'")
    src, dst, raw = parts
    try:
        weight = _WEIGHT_PARSERS[weight_type](raw)
    except ValueError:
        raise typer.BadParameter(f"Weight '{raw}' is not a valid {weight_type.value}") from None
    return src, dst, weight


def build_graph(
    edges: Iterable[str], nodes: Iterable[str], weight_type: WeightType
) -> Graph:
    """Build a graph from extra nodes plus edge tokens."""
    triples = [parse_edge(token, weight_type) for token in edges]
    graph = Graph.from_nodes(nodes)
    for src, dst, weight in triples:
        graph.insert_node(src)
        graph.insert_node(dst)
        graph.insert_edge(src, dst, weight)
    return graph


def format_triple(view: EdgeView) -> str:
    return (
        f"[cyan]{escape(str(view.source))}[/] -> [cyan]{escape(str(view.destination))}[/] "
        f"[dim]|[/] {escape(str(view.weight))}"
    )


def print_rendering(graph: Graph) -> None:
    text = graph.render()
    if not text:
        console.print("[dim]Empty graph[/]")
        return
    console.print(escape(text), end="", highlight=False)


@contextmanager
def graph_errors() -> Iterator[None]:
    """Report graph errors in red and exit with status 1."""
    try:
        yield
    except GraphError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from e


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output")] = False,
) -> None:
    """Configure logging for every command."""
    logging.basicConfig(
        level=get_log_level(verbose),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command()
def render(
    edges: EdgesArg = None,
    node: NodesOpt = None,
    weight_type: WeightOpt = WeightType.INT,
) -> None:
    """Print the canonical rendering of a graph."""
    with graph_errors():
        graph = build_graph(edges or [], node or [], weight_type)
        print_rendering(graph)


@app.command()
def walk(
    edges: EdgesArg = None,
    reverse: Annotated[bool, typer.Option("--reverse", "-r", help="Walk backwards")] = False,
    node: NodesOpt = None,
    weight_type: WeightOpt = WeightType.INT,
) -> None:
    """Print every edge in cursor order."""
    with graph_errors():
        graph = build_graph(edges or [], node or [], weight_type)
        views = list(reversed(graph)) if reverse else list(graph)

    if not views:
        console.print("[dim]No edges[/]")
        return
    for view in views:
        console.print(format_triple(view), highlight=False)
    console.print(f"\n[dim]Nodes: {graph.num_nodes} | Edges: {len(views)}[/]")


@app.command()
def neighbors(
    src: Annotated[str, typer.Argument(help="Source node")],
    edges: EdgesArg = None,
    node: NodesOpt = None,
    weight_type: WeightOpt = WeightType.INT,
) -> None:
    """Show the nodes an edge from SRC reaches, with their weights."""
    with graph_errors():
        graph = build_graph(edges or [], node or [], weight_type)
        connected = graph.get_connected(src)
        weights = {dst: graph.get_weights(src, dst) for dst in connected}

    console.print(f"\n[bold cyan]{escape(src)}[/]")
    if not connected:
        console.print("  [dim]No outgoing edges[/]")
        return
    console.print("  [green]Connects to:[/]")
    for dst in connected:
        listed = ", ".join(str(w) for w in weights[dst])
        console.print(f"    [cyan]{escape(dst)}[/] [dim](weights: {escape(listed)})[/]")


@app.command()
def merge(
    old: Annotated[str, typer.Argument(help="Node to merge away")],
    new: Annotated[str, typer.Argument(help="Node that absorbs OLD")],
    edges: EdgesArg = None,
    node: NodesOpt = None,
    weight_type: WeightOpt = WeightType.INT,
) -> None:
    """Merge OLD into NEW and print the resulting graph."""
    with graph_errors():
        graph = build_graph(edges or [], node or [], weight_type)
        graph.merge_replace(old, new)
        print_rendering(graph)


def _section(title: str) -> None:
    console.print(f"\n[bold]{title}[/]")


def _print_edges(views: Iterable[EdgeView]) -> None:
    for view in views:
        console.print(f"  {escape(str(view))}", highlight=False)


@app.command()
def demo() -> None:
    """Walk through every graph operation on a small sample graph."""
    g = Graph()
    g.insert_node("hello")
    console.print(f"is_node('hello'): {g.is_node('hello')}")

    for value in ("how", "are", "you?"):
        g.insert_node(value)
    for src, dst, weight in [
        ("hello", "how", 5),
        ("hello", "are", 8),
        ("hello", "are", 2),
        ("how", "you?", 3),
        ("how", "are", 10),
        ("how", "you?", 1),
        ("how", "hello", 4),
        ("are", "you?", 3),
        ("are", "are", 10),
    ]:
        g.insert_edge(src, dst, weight)

    _section("Rendering")
    print_rendering(g)

    _section("Full graph")
    _print_edges(g)

    g_copy = g.copy()
    g_moved = g_copy.move()
    _section("Moved copy")
    print_rendering(g_moved)
    console.print(f"Copy after move is empty: {len(g_copy) == 0}")

    _section("Connectivity")
    console.print(f"is_connected('how', 'how'): {g.is_connected('how', 'how')}")
    console.print(f"is_connected('how', 'hello'): {g.is_connected('how', 'hello')}")
    console.print(f"get_connected('how'): {escape(str(g.get_connected('how')))}")
    try:
        g.get_connected("h")
    except NodeNotFoundError as e:
        console.print(f"[yellow]exception raised:[/] {escape(str(e))}")
    console.print(f"get_weights('how', 'you?'): {escape(str(g.get_weights('how', 'you?')))}")

    _section("Erase")
    console.print(f"erase('how', 'hello', 0): {g.erase('how', 'hello', 0)}")
    console.print(f"erase('how', 'hello', 4): {g.erase('how', 'hello', 4)}")

    _section("Reverse")
    _print_edges(reversed(g))

    _section("merge_replace('how', 'are')")
    g.merge_replace("how", "are")
    _print_edges(g)

    _section("find('hello', 'are', 5) onwards")
    cursor, end = g.find("hello", "are", 5), g.end()
    while cursor != end:
        console.print(f"  {escape(str(cursor.value))}", highlight=False)
        cursor.advance()

    _section("Erase first hello -> are edge by cursor")
    cursor = g.begin()
    while cursor != end:
        if cursor.value.source == "hello" and cursor.value.destination == "are":
            g.erase_at(cursor)
            break
        cursor.advance()
    _print_edges(g)

    _section("replace('hello', 'goodbye')")
    g.replace("hello", "goodbye")
    _print_edges(g)
    console.print(f"is_node('hello'): {g.is_node('hello')}")

    _section("delete_node('how')")
    console.print(f"delete_node('how'): {g.delete_node('how')}")
    _print_edges(g)

    _section("Equality")
    values = ["Hello", "how", "are", "you?"]
    sample = [("Hello", "how", 5), ("Hello", "are", 8), ("Hello", "are", 2), ("how", "you?", 3)]
    g1 = Graph(nodes=values, edges=sample)
    g2 = Graph(nodes=values, edges=sample)
    console.print(f"g1 == g2: {g1 == g2}")
    console.print(f"g != g1: {g != g1}")

    _section("get_nodes()")
    console.print(escape(str(g.get_nodes())))

    _section("clear()")
    g.clear()
    console.print(f"Edges after clear: {g.num_edges}")


if __name__ == "__main__":
    app()
