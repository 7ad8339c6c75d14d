"""
ssm_filters – Parameter Store filter value objects and request documents.

Import path convention::

    from ssm_filters.value_object import ParameterStringFilter
    from ssm_filters.request import DescribeParametersRequest, GetParametersByPathRequest
    from ssm_filters.kernel.errors import InvalidArgumentError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
