"""Version proposal from public interface diffs."""

from apibump.versioning.classify import BumpKind, ChangeSummary, classify
from apibump.versioning.differ import DiffLine, InterfaceDiff, diff_lines
from apibump.versioning.engine import Proposal, evaluate, propose_next_version
from apibump.versioning.normalize import InterfaceSnapshot, normalize_interface, split_lines
from apibump.versioning.semver import SemanticVersion, next_version

__all__ = [
    # Engine
    "propose_next_version",
    "evaluate",
    "Proposal",
    # Normalizer
    "InterfaceSnapshot",
    "normalize_interface",
    "split_lines",
    # Differ
    "DiffLine",
    "InterfaceDiff",
    "diff_lines",
    # Classifier
    "BumpKind",
    "ChangeSummary",
    "classify",
    # Semantic versions
    "SemanticVersion",
    "next_version",
]
