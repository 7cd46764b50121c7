"""
Kubernetes 리소스 단위 변환 유틸리티
CPU와 메모리 quantity 문자열을 표준 단위로 변환하고, 사용률 계산 및 표시용 포맷 제공

metrics-server가 돌려주는 값('2001669174n', '54Mi')과 GameServer spec에
설정된 값('1.5', '2Gi')은 단위가 제각각이므로 모두 밀리코어/바이트로 맞춘 뒤 비교한다.
"""
import logging
from typing import Optional

logger = logging.getLogger(__name__)

KIB = 1024
MIB = 1024 ** 2
GIB = 1024 ** 3

# 두 글자 접미사를 먼저 검사해야 'Mi'가 'M'으로 잘못 매칭되지 않는다
_MEMORY_UNITS = (
    ('Ki', KIB),
    ('Mi', MIB),
    ('Gi', GIB),
    ('Ti', 1024 ** 4),
    ('k', 1000),
    ('K', 1000),
    ('M', 1000 ** 2),
    ('G', 1000 ** 3),
    ('T', 1000 ** 4),
)


def parse_cpu_to_millicores(cpu: Optional[str]) -> int:
    """CPU 문자열을 밀리코어(millicores)로 변환

    지원되는 형식:
    - '2001669174n' -> 2001 (nanocores)
    - '500000u' -> 500 (microcores)
    - '287m' -> 287
    - '1.5' -> 1500 (cores)

    파싱할 수 없는 값은 0을 반환한다.
    """
    if not cpu:
        return 0

    cpu = str(cpu).strip()
    try:
        if cpu.endswith('n'):
            return int(cpu[:-1]) // 1_000_000
        if cpu.endswith('u'):
            return int(cpu[:-1]) // 1_000
        if cpu.endswith('m'):
            return int(cpu[:-1])
        return int(float(cpu) * 1000)
    except (ValueError, OverflowError):
        logger.debug(f"Failed to parse CPU quantity: {cpu!r}")
        return 0


def parse_memory_to_bytes(memory: Optional[str]) -> int:
    """메모리 문자열을 바이트로 변환

    지원되는 형식:
    - '1024Ki', '54Mi', '2Gi', '1Ti' (1024 단위)
    - '500k', '500K', '128M', '1G', '1T' (1000 단위)
    - '1048576' (바이트)

    소수 값('1.5Gi')은 바이트 단위로 내림한다. 파싱할 수 없는 값은 0.
    """
    if not memory:
        return 0

    memory = str(memory).strip()
    try:
        for suffix, multiplier in _MEMORY_UNITS:
            if memory.endswith(suffix):
                return int(float(memory[:-len(suffix)]) * multiplier)
        return int(float(memory))
    except (ValueError, OverflowError):
        logger.debug(f"Failed to parse memory quantity: {memory!r}")
        return 0


def calculate_cpu_percentage(current: Optional[str], configured: Optional[str]) -> float:
    """설정된 CPU 대비 현재 사용률(%)

    burstable 리소스는 100%를 넘을 수 있으므로 상한을 두지 않는다.
    """
    current_millicores = parse_cpu_to_millicores(current)
    configured_millicores = parse_cpu_to_millicores(configured)

    logger.debug(
        f"CPU calculation: current={current} ({current_millicores}m), "
        f"configured={configured} ({configured_millicores}m)"
    )

    if configured_millicores == 0:
        return 0.0
    return current_millicores / configured_millicores * 100


def calculate_memory_percentage(current: Optional[str], configured: Optional[str]) -> float:
    """설정된 메모리 대비 현재 사용률(%)"""
    current_bytes = parse_memory_to_bytes(current)
    configured_bytes = parse_memory_to_bytes(configured)

    if configured_bytes == 0:
        return 0.0
    return current_bytes / configured_bytes * 100


def format_cpu_for_display(cpu: Optional[str]) -> str:
    """CPU 값을 읽기 쉬운 형태로 변환

    - '1998140547n' -> '1998m', '500000u' -> '500m'
    - '287m' -> '287m'
    - '1.5' -> '1.5', '2' -> '2.0'
    - '0.25' -> '250m'
    """
    if not cpu:
        return "0m"

    cpu = str(cpu).strip()
    if cpu.endswith('n') or cpu.endswith('u'):
        divisor = 1_000_000 if cpu.endswith('n') else 1_000
        try:
            return f"{int(cpu[:-1]) // divisor}m"
        except ValueError:
            return cpu

    if cpu.endswith('m'):
        return cpu

    try:
        cores = float(cpu)
    except ValueError:
        return cpu

    if cores >= 1:
        return f"{cores:.1f}"
    return f"{cores * 1000:.0f}m"


def format_memory_for_display(memory: Optional[str]) -> str:
    """메모리 값을 가장 적절한 바이너리 단위로 변환

    - '2147483648' -> '2.0Gi'
    - '56623104' -> '54Mi'
    - '2048' -> '2Ki'
    """
    size = parse_memory_to_bytes(memory)
    if size == 0:
        return "0Mi"

    if size >= GIB:
        return f"{size / GIB:.1f}Gi"
    if size >= MIB:
        return f"{size / MIB:.0f}Mi"
    if size >= KIB:
        return f"{size / KIB:.0f}Ki"
    return str(size)


__all__ = [
    "parse_cpu_to_millicores",
    "parse_memory_to_bytes",
    "calculate_cpu_percentage",
    "calculate_memory_percentage",
    "format_cpu_for_display",
    "format_memory_for_display",
]
