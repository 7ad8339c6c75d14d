"""DDD building blocks — public re-export surface."""

from ssm_filters.kernel.ddd.value_object import ValueObject

__all__ = ["ValueObject"]
