"""
命令行入口
使用 typer 和 rich 构造拓扑并展示统计信息
"""

from __future__ import annotations

from typing import Optional, List
from pathlib import Path

import typer
import yaml
from rich.console import Console
from rich.table import Table

from .core.errors import TopologyError, InvalidArgumentError
from .core.types import TopologyKind, TopologyStats
from .config.settings import AppSettings
from .topology import Graph, TopologyFactory, expected_vertex_count, gproduct
from .utils.functional import product_of
from .utils.logging import configure_logging, get_logger

# 创建应用和控制台
app = typer.Typer(
    name="topo-graph",
    help="互连网络拓扑构造与分析工具",
    add_completion=False,
    rich_markup_mode="rich"
)
console = Console()

logger = get_logger(__name__)

app_settings = AppSettings()


def version_callback(value: bool):
    """版本回调"""
    if value:
        from . import __version__
        console.print(f"topo-graph v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None, "--version", "-v",
        callback=version_callback,
        help="显示版本信息"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="详细输出"),
    config_file: Optional[Path] = typer.Option(
        None, "--config-file", "-c", help="从配置文件加载设置 (YAML/JSON)"
    ),
):
    """互连网络拓扑构造与分析工具"""
    global app_settings
    if config_file and config_file.exists():
        try:
            file_data = yaml.safe_load(config_file.read_text()) or {}
        except yaml.YAMLError as e:
            console.print(f"[red]读取配置文件失败: {e}[/red]")
            raise typer.Exit(1)
        app_settings = AppSettings(**file_data)
    else:
        app_settings = AppSettings()

    configure_logging(verbose or app_settings.verbose)
    logger.info("cli_started", verbose=verbose, max_vertices=app_settings.max_vertices)


def parse_dimensions(text: str) -> List[int]:
    """解析逗号分隔的尺寸列表，如 "4,3,2"；空串表示无尺寸"""
    items = [item.strip() for item in text.split(",") if item.strip()]
    try:
        return [int(item) for item in items]
    except ValueError:
        raise typer.BadParameter(f"尺寸必须为逗号分隔的整数: {text!r}")


def estimate_vertices(kind: TopologyKind, dimensions: List[int]) -> int:
    """构造前估算顶点数"""
    if kind.is_composite:
        return expected_vertex_count(dimensions)
    if kind == TopologyKind.OPG:
        return 1
    return product_of(dimensions) if dimensions else 0


def build_topology(kind: TopologyKind, dimensions: List[int]) -> Graph:
    """按种类和尺寸构造拓扑，超出顶点上限时拒绝"""
    estimated = estimate_vertices(kind, dimensions)
    if estimated > app_settings.max_vertices:
        raise InvalidArgumentError(
            f"{kind.value}{dimensions} 将产生 {estimated} 个顶点，超过上限 {app_settings.max_vertices}"
        )
    return TopologyFactory.create(kind, dimensions)


def display_stats(stats: TopologyStats, title: str = "拓扑信息"):
    """显示拓扑统计信息"""
    table = Table(title=title)
    table.add_column("属性", style="cyan")
    table.add_column("值", style="green")

    table.add_row("名称", stats.name)
    table.add_row("种类", stats.kind.value)
    table.add_row("尺寸", ", ".join(str(d) for d in stats.dimensions) or "-")
    table.add_row("顶点数", str(stats.num_vertices))
    table.add_row("有向边数", str(stats.num_edges))
    table.add_row("直径", str(stats.diameter) if stats.diameter >= 0 else "未定义 (-1)")
    table.add_row("强连通", "是" if stats.is_strongly_connected else "否")
    table.add_row("平均出度", f"{stats.average_out_degree:.2f}")

    console.print(table)
    logger.info(
        "topology_info",
        name=stats.name,
        kind=stats.kind.value,
        vertices=stats.num_vertices,
        edges=stats.num_edges,
        diameter=stats.diameter,
    )


def display_listing(graph: Graph, show_vertices: bool, show_edges: bool):
    """显示顶点/边列表（按配置截断）"""
    limit = app_settings.listing_limit
    if show_vertices:
        vertices = graph.vertices
        shown = ", ".join(str(v) for v in vertices[:limit])
        suffix = f" ... (+{len(vertices) - limit})" if len(vertices) > limit else ""
        console.print(f"[bold]顶点[/bold]: {shown}{suffix}")
    if show_edges:
        edges = graph.edges
        shown = ", ".join(f"{s}→{t}" for s, t in edges[:limit])
        suffix = f" ... (+{len(edges) - limit})" if len(edges) > limit else ""
        console.print(f"[bold]边[/bold]: {shown}{suffix}")


@app.command("kinds")
def list_kinds():
    """列出支持的拓扑种类"""
    table = Table(title="拓扑种类")
    table.add_column("种类", style="cyan")
    table.add_column("描述", style="green")
    for kind in TopologyFactory.registered_kinds():
        table.add_row(kind.value, kind.description)
    console.print(table)


@app.command("describe")
def describe_topology(
    kind: TopologyKind = typer.Argument(..., help="拓扑种类", case_sensitive=False),
    dimensions: Optional[List[int]] = typer.Argument(None, help="尺寸（环/链一个，网格/环面任意个）"),
    show_vertices: bool = typer.Option(False, "--vertices", help="列出顶点"),
    show_edges: bool = typer.Option(False, "--edges", help="列出边"),
):
    """构造拓扑并显示统计信息

    Examples:
      describe URing 8           # 8 顶点单向环
      describe BGrid 3 1 5 2     # 规范化为 BGrid[5,3,2]
      describe BTorus 4 4 --edges
    """
    try:
        graph = build_topology(kind, list(dimensions or []))
    except TopologyError as e:
        console.print(f"[red]构造失败: {e}[/red]")
        logger.error("build_failed", kind=kind.value, message=str(e))
        raise typer.Exit(1)

    display_stats(graph.stats())
    display_listing(graph, show_vertices, show_edges)


@app.command("product")
def describe_product(
    left_kind: TopologyKind = typer.Argument(..., help="左因子种类", case_sensitive=False),
    right_kind: TopologyKind = typer.Argument(..., help="右因子种类", case_sensitive=False),
    left_dims: str = typer.Option("", "--left", "-l", help="左因子尺寸，逗号分隔"),
    right_dims: str = typer.Option("", "--right", "-r", help="右因子尺寸，逗号分隔"),
    show_vertices: bool = typer.Option(False, "--vertices", help="列出顶点"),
    show_edges: bool = typer.Option(False, "--edges", help="列出边"),
):
    """计算两个拓扑的笛卡尔积并显示统计信息

    Examples:
      product UMesh UMesh -l 3 -r 3      # 9 顶点, 12 边
      product BGrid BRing -l 2,2 -r 5
    """
    left = parse_dimensions(left_dims)
    right = parse_dimensions(right_dims)
    try:
        estimated = estimate_vertices(left_kind, left) * estimate_vertices(right_kind, right)
        if estimated > app_settings.max_vertices:
            raise InvalidArgumentError(
                f"积图将产生 {estimated} 个顶点，超过上限 {app_settings.max_vertices}"
            )
        result = gproduct(build_topology(left_kind, left), build_topology(right_kind, right))
    except TopologyError as e:
        console.print(f"[red]构造失败: {e}[/red]")
        logger.error("product_failed", left=left_kind.value, right=right_kind.value, message=str(e))
        raise typer.Exit(1)

    display_stats(result.stats(), title="笛卡尔积信息")
    display_listing(result, show_vertices, show_edges)


# 主入口
if __name__ == "__main__":
    app()
