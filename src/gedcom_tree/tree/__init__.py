from .projector import NodeKind, TreeNode, TreeProjector, find_root_candidates, project_tree

__all__ = [
    "NodeKind",
    "TreeNode",
    "TreeProjector",
    "find_root_candidates",
    "project_tree",
]
