# The module responsible for drawing the shape of a tree, mostly for debugging rotations
from __future__ import annotations
from typing import TYPE_CHECKING
from ..node import Node
from ..util import is_ipython

if TYPE_CHECKING:
    from ..avl import AVLTree

def render(tree: AVLTree, indent: int = 4) -> str:
    """Draws the tree sideways: one key per line, the right subtree above its parent and the left subtree below,
    indented by depth. Reading the output with your head tilted left shows the usual top-down picture."""
    if tree.root is None:
        return "<empty>"

    lines: list[str] = []
    def draw(node: Node | None, depth: int):
        if node is None:
            return
        draw(node.right, depth + 1)
        lines.append(" " * (indent * depth) + repr(node.key))
        draw(node.left, depth + 1)

    draw(tree.root, 0)
    return "\n".join(lines)

def display_tree(tree: AVLTree, indent: int = 4, skip_display: bool = False) -> str:
    """Displays the rendered tree, as preformatted HTML inside IPython or printed otherwise. Returns the rendered text."""
    text = render(tree, indent=indent)
    if skip_display:
        return text

    if is_ipython():
        from IPython.display import display, HTML
        import html
        display(HTML(f"<pre>{html.escape(text)}</pre>"))
    else:
        print(text)
    return text
