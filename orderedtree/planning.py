"""Execution planning for orderedtree.

The ExecutionPlan validates a TraversalConfig, assembles the traverser and
collector it asks for, and runs the traversal.
"""

import logging
from typing import Any, Dict, Iterator, List, Optional, Tuple

from .config import DataRequirement, TraversalConfig, TraversalStrategy
from .core.adapter import OrderedTreeAdapter, TreeAdapter
from .core.collector import (
    ChildCountCollector,
    CustomCollector,
    DataCollector,
    FullNodeCollector,
    IdentifierCollector,
    MetadataCollector,
    PathCollector,
    ValueCollector,
)
from .core.node import TreeNode
from .core.traverser import TreeTraverser, create_traverser
from .errors import ConfigurationError

logger = logging.getLogger(__name__)


class PruningAdapter(TreeAdapter):
    """Adapter that hides the children of nodes rejected by the filters.

    Wraps another adapter; used by the plan when
    ``FilterConfig.prune_on_exclude`` is set.
    """

    def __init__(self, base_adapter: TreeAdapter, filter_config):
        self._base_adapter = base_adapter
        self._filter = filter_config

    def get_children(self, node: TreeNode) -> Iterator[TreeNode]:
        if not self._filter.should_explore_children(node):
            return iter(())
        return self._base_adapter.get_children(node)

    def get_parent(self, node: TreeNode) -> Optional[TreeNode]:
        return self._base_adapter.get_parent(node)

    def get_depth(self, node: TreeNode) -> int:
        return self._base_adapter.get_depth(node)

    def supports_full_data(self) -> bool:
        return self._base_adapter.supports_full_data()


class ExecutionPlan:
    """Validated execution plan for tree traversal.

    The plan is the bridge between user intent (TraversalConfig) and
    execution. All configuration problems are reported together, before
    any node is visited.
    """

    def __init__(self, config: TraversalConfig, adapter: Optional[TreeAdapter] = None):
        """Create and validate an execution plan.

        Args:
            config: User's traversal configuration
            adapter: Tree adapter (defaults to OrderedTreeAdapter)

        Raises:
            ConfigurationError: If the configuration is inconsistent or the
                adapter can't satisfy it
        """
        self.config = config
        self.adapter = adapter if adapter is not None else OrderedTreeAdapter()

        config_errors = config.validate()
        if config_errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        capability_issues = self._validate_capabilities()
        if capability_issues:
            raise ConfigurationError(
                f"Adapter limitations: {'; '.join(capability_issues)}"
            )

        if config.filter.prune_on_exclude:
            self.adapter = PruningAdapter(self.adapter, config.filter)

        self.traverser = self._select_traverser()
        self.collector = self._select_collector()

        self.nodes_processed = 0
        self.errors_encountered: List[Tuple[str, str]] = []

        logger.debug(
            "Execution plan ready: traverser=%s collector=%s",
            self.traverser.__class__.__name__,
            self.collector.__class__.__name__,
        )

    def _validate_capabilities(self) -> List[str]:
        issues = []

        if self.config.data_requirements == DataRequirement.FULL_NODE:
            if not self.adapter.supports_full_data():
                issues.append("Adapter cannot provide full node data as required")

        return issues

    def _select_traverser(self) -> TreeTraverser:
        if self.config.strategy == TraversalStrategy.CUSTOM:
            return self.config.custom_traverser

        strategy_map = {
            TraversalStrategy.BREADTH_FIRST: "bfs",
            TraversalStrategy.DEPTH_FIRST_PRE: "dfs_pre",
            TraversalStrategy.DEPTH_FIRST_POST: "dfs_post",
            TraversalStrategy.LEVEL_ORDER: "level",
        }

        return create_traverser(strategy_map[self.config.strategy], self.adapter)

    def _select_collector(self) -> DataCollector:
        if self.config.data_requirements == DataRequirement.CUSTOM:
            collector = self.config.custom_collector
            if isinstance(collector, DataCollector):
                return collector
            # Plain callables are wrapped
            return CustomCollector(self.adapter, collector)

        collector_map = {
            DataRequirement.VALUE: ValueCollector,
            DataRequirement.IDENTIFIER_ONLY: IdentifierCollector,
            DataRequirement.METADATA: MetadataCollector,
            DataRequirement.FULL_NODE: FullNodeCollector,
            DataRequirement.CHILDREN_COUNT: ChildCountCollector,
            DataRequirement.PATH: PathCollector,
        }

        collector_class = collector_map[self.config.data_requirements]
        return collector_class(self.adapter)

    def _handle_error(self, node: TreeNode, error: Exception) -> None:
        """Record an error raised while handling a node.

        Re-raises the error unless ``skip_errors`` is set.
        """
        self.errors_encountered.append((node.identifier(), str(error)))

        if self.config.on_error:
            self.config.on_error(node, error)

        if not self.config.skip_errors:
            raise error

        logger.warning("Skipping node %s after error: %s", node.identifier(), error)

    def execute(self, root: TreeNode) -> Iterator[Tuple[TreeNode, Any]]:
        """Execute the traversal plan.

        Args:
            root: Node to start traversal from; depths are relative to it

        Yields:
            Tuples of (node, collected_data)
        """
        self.nodes_processed = 0
        self.errors_encountered = []
        self.collector.reset()

        for node, depth in self.traverser.traverse(
            root,
            max_depth=self.config.depth.deepest_depth(),
            min_depth=self.config.depth.min_depth
        ):
            if not self.config.performance.check_node_limit(self.nodes_processed + 1):
                logger.debug("Node limit of %d reached, stopping",
                             self.config.performance.max_nodes)
                break

            try:
                if not self.config.filter.should_include(node):
                    continue

                if not self.config.depth.should_yield(depth):
                    continue

                data = self.collector.collect(node, depth)
            except Exception as e:
                self._handle_error(node, e)
                continue

            self.nodes_processed += 1
            yield (node, data)

    def estimate_work(self, root: TreeNode) -> Dict[str, Any]:
        """Estimate the number of nodes the traversal may visit.

        Args:
            root: Node to start traversal from

        Returns:
            Dictionary with 'estimated_nodes' (None if unknown)
        """
        estimated = self.adapter.estimated_size(root)
        max_nodes = self.config.performance.max_nodes
        if estimated is not None and max_nodes is not None:
            estimated = min(estimated, max_nodes)
        return {'estimated_nodes': estimated}

    def get_summary(self) -> Dict[str, Any]:
        """Get summary of execution plan.

        Returns:
            Dictionary with plan details
        """
        return {
            'strategy': self.config.strategy.value,
            'data_requirements': self.config.data_requirements.value,
            'max_depth': self.config.depth.max_depth,
            'min_depth': self.config.depth.min_depth,
            'max_nodes': self.config.performance.max_nodes,
            'adapter': self.adapter.__class__.__name__,
            'traverser': self.traverser.__class__.__name__,
            'collector': self.collector.__class__.__name__,
        }
