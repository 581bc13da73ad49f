from __future__ import annotations

import logging
from typing import Any, Dict

import structlog


def configure_logging(verbose: bool = False, colors: bool = True) -> None:
    """初始化结构化日志（仅由 CLI 等入口调用，库代码不主动配置）。"""
    log_level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(level=log_level, format="%(message)s", force=True)

    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(colors=colors),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> Any:
    """获取挂在标准库 logger 上的结构化 logger

    未调用 configure_logging 时由标准库级别（默认 WARNING）过滤，debug 事件不输出
    """
    return structlog.wrap_logger(
        logging.getLogger(name or "topo_graph"),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def graph_context(graph: Any) -> Dict[str, Any]:
    """提取图的日志上下文字段"""
    return {
        "graph": graph.name,
        "vertices": graph.num_vertices,
        "edges": graph.num_edges,
    }
