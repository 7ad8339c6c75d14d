"""Request documents – listing operations that consume parameter filters."""
from ssm_filters.request.base import CONTENT_TYPE, TARGET_PREFIX, ParameterQueryRequest
from ssm_filters.request.describe_parameters import DescribeParametersRequest
from ssm_filters.request.get_parameters_by_path import GetParametersByPathRequest

__all__ = [
    "CONTENT_TYPE",
    "TARGET_PREFIX",
    "DescribeParametersRequest",
    "GetParametersByPathRequest",
    "ParameterQueryRequest",
]
