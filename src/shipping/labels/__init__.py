"""Default localized labels for shipping modules."""

from shipping.labels.bundle import DEFAULT_BUNDLES

__all__ = ["DEFAULT_BUNDLES"]
