# support/ast_visualizer.py
# This file is part of Propcalc - A Propositional Logic Evaluator
#
# Graphviz rendering of formula syntax trees

import os
import subprocess
from typing import Optional

from graphviz import Digraph, ExecutableNotFound

from formula import ast_nodes as ast
from formula.printer import to_text
from support.logger import get_logger

logger = get_logger(__name__)

VISUALIZATION_OUTPUT_FOLDER = "ast_visualizations"

_NODE_COLORS = {
    ast.Proposition: "palegreen",
    ast.Negation: "lightcoral",
    ast.BinaryOp: "lightskyblue",
}


def _node_label(node: ast.Expr) -> str:
    if isinstance(node, ast.Proposition):
        return node.name
    if isinstance(node, ast.Negation):
        return ast.NEGATION_SYMBOL
    return f"{node.kind.symbol}\n{node.kind.name.lower()}"


def build_ast_graph(expr: ast.Expr, fmt: str = "png") -> Digraph:
    """
    Builds a Graphviz digraph with one vertex per AST node and an edge from
    each node to its operands. Binary operands are labelled L and R.
    Identical subtrees still get distinct vertices, since the AST is a tree.

    Args:
        expr: Root of the formula AST.
        fmt: The output format used when the graph is rendered.
    """
    dot = Digraph(comment=f"AST for {to_text(expr)}", format=fmt)
    dot.attr(rankdir="TB", nodesep="0.4", ranksep="0.5")
    dot.attr("node", style="filled", fontsize="12")

    # Vertex ids are assigned in pre-order; children are pushed right to left
    stack = [(expr, None, "")]
    counter = 0
    while stack:
        node, parent_id, edge_label = stack.pop()
        node_id = f"n{counter}"
        counter += 1

        shape = "ellipse" if isinstance(node, ast.Proposition) else "box"
        dot.node(node_id, _node_label(node), shape=shape,
                 fillcolor=_NODE_COLORS[type(node)])
        if parent_id is not None:
            dot.edge(parent_id, node_id, label=edge_label)

        if isinstance(node, ast.BinaryOp):
            stack.append((node.right, node_id, "R"))
            stack.append((node.left, node_id, "L"))
        elif isinstance(node, ast.Negation):
            stack.append((node.operand, node_id, ""))

    return dot


def render_ast(expr: ast.Expr, base_filename: str, fmt: str = "png") -> Optional[str]:
    """
    Renders the syntax tree of a formula with Graphviz. The output image is
    saved to a dedicated folder ('ast_visualizations').

    Args:
        expr: Root of the formula AST.
        base_filename: The base name for the output file.
        fmt: The output format for the image (e.g., "png", "svg").

    Returns:
        Path of the rendered file, or None if rendering failed.
    """
    dot = build_ast_graph(expr, fmt)

    if not os.path.exists(VISUALIZATION_OUTPUT_FOLDER):
        try:
            os.makedirs(VISUALIZATION_OUTPUT_FOLDER)
            logger.info(f"Created directory for AST visualizations: {VISUALIZATION_OUTPUT_FOLDER}")
            output_path = os.path.join(VISUALIZATION_OUTPUT_FOLDER, base_filename)
        except OSError as e:
            logger.error(f"Could not create directory {VISUALIZATION_OUTPUT_FOLDER}: {e}. "
                         f"Saving to current directory instead.")
            output_path = base_filename
    else:
        output_path = os.path.join(VISUALIZATION_OUTPUT_FOLDER, base_filename)

    try:
        rendered = dot.render(output_path, cleanup=True)
    except (ExecutableNotFound, subprocess.CalledProcessError) as e:
        logger.error(f"Error rendering AST with Graphviz: {e}. "
                     f"Ensure the Graphviz 'dot' executable is installed and on PATH.")
        return None

    logger.info(f"AST visualization saved to {rendered}")
    return rendered
