"""Category index for the Tweakwise front-end.

Flattens a navigation tree into a mapping from a domain-salted key to
category ID. The front-end script uses the key as a lookup handle, so the
same category and domain must always produce the same key.
"""

import hashlib
from collections.abc import Iterable

import structlog

from tweakwise.domain.models import CategoryTreeNode

logger = structlog.get_logger()


def category_key(category_id: str, domain_id: str) -> str:
    """Compute the opaque lookup key for a category on a domain.

    MD5 only provides a fixed-width key here, not integrity.

    Args:
        category_id: Category ID.
        domain_id: Sales channel domain ID.

    Returns:
        32 character hex key.
    """
    return hashlib.md5(f"{category_id}_{domain_id}".encode()).hexdigest()


class CategoryIndexBuilder:
    """Builds the category lookup map for one domain.

    Traversal is depth-first pre-order over an explicit stack, so deep
    trees never hit the interpreter recursion limit.

    Example usage:
        builder = CategoryIndexBuilder()
        category_data = builder.build(navigation_tree, domain_id)
    """

    def build(
        self,
        roots: Iterable[CategoryTreeNode],
        domain_id: str,
        max_depth: int | None = None,
    ) -> dict[str, str]:
        """Flatten the tree into ``{key: category_id}``.

        Args:
            roots: Top-level nodes of the navigation tree.
            domain_id: Sales channel domain ID used to salt keys.
            max_depth: Optional depth cap; roots are at depth 1.

        Returns:
            Mapping with one entry per reachable category.
        """
        category_data: dict[str, str] = {}
        visited: set[str] = set()

        stack = [(node, 1) for node in reversed(list(roots))]
        while stack:
            node, depth = stack.pop()

            if node.id in visited:
                logger.warning(
                    "Category visited twice, skipping",
                    category_id=node.id,
                    domain_id=domain_id,
                )
                continue
            visited.add(node.id)

            category_data[category_key(node.id, domain_id)] = node.id

            if max_depth is not None and depth >= max_depth:
                continue
            # Reversed so the first child is popped first
            stack.extend((child, depth + 1) for child in reversed(node.children))

        return category_data
