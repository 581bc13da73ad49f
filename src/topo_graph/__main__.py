#!/usr/bin/env python3
"""
Entry point for running topo_graph as a module
This allows running: python -m topo_graph
"""

from topo_graph.cli import app

if __name__ == "__main__":
    app()
