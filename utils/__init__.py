# Utility functions
from .helpers import (
    nested_field,
    nested_map,
    nested_list,
    nested_string,
    nested_int,
    nested_bool,
    is_empty,
    drop_empty,
)
from .resources import (
    parse_cpu_to_millicores,
    parse_memory_to_bytes,
    calculate_cpu_percentage,
    calculate_memory_percentage,
    format_cpu_for_display,
    format_memory_for_display,
)

# 환경 자동 감지 K8s 클라이언트 (로컬 개발 지원)
from .k8s_client import (
    get_k8s_clients,
    is_running_in_cluster,
    get_environment_info,
)

__all__ = [
    'nested_field', 'nested_map', 'nested_list', 'nested_string',
    'nested_int', 'nested_bool', 'is_empty', 'drop_empty',
    'parse_cpu_to_millicores', 'parse_memory_to_bytes',
    'calculate_cpu_percentage', 'calculate_memory_percentage',
    'format_cpu_for_display', 'format_memory_for_display',
    'get_k8s_clients', 'is_running_in_cluster', 'get_environment_info',
]
