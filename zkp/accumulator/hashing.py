"""
멤버 인코딩: 임의의 바이트열 → FR 스칼라
==========================================

Keccak-256 다이제스트(32바이트)를 리틀엔디안 정수로 읽어
스칼라 필드 위수로 모듈러 축소한다.

256비트 다이제스트를 약 254비트 위수로 축소할 때 생기는 통계적 편향은
무시할 수 있는 수준이므로 보정하지 않는다.

사용 예시:
    >>> from zkp.accumulator.hashing import hash_to_scalar
    >>> x = hash_to_scalar(b"alice")
    >>> x == hash_to_scalar(b"alice")  # True (결정론적)
"""

from Crypto.Hash import keccak

from zkp.accumulator.field import FR, CURVE_ORDER


# Keccak-256 출력 크기 (바이트)
DIGEST_SIZE = 32


def keccak256(data):
    """Keccak-256 다이제스트 (SHA3-256이 아닌 원래 Keccak 패딩)."""
    h = keccak.new(digest_bits=256)
    h.update(data)
    return h.digest()


def hash_to_scalar(data):
    """바이트열을 FR 스칼라로 매핑한다.

    Args:
        data: bytes, bytearray 또는 memoryview. 빈 바이트열도 허용된다.

    Returns:
        FR: keccak256(data)를 리틀엔디안으로 해석한 값 mod CURVE_ORDER

    Raises:
        TypeError: data가 바이트열 타입이 아닐 때 (예: str)
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(
            f"바이트열이 필요합니다: {type(data).__name__}"
        )
    digest = keccak256(data)
    return FR(int.from_bytes(digest, "little") % CURVE_ORDER)
