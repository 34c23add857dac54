"""
누산기(Accumulator) 기반 모듈: 스칼라 필드 및 bn128 곡선 연산
==============================================================

누산기 전체에서 사용되는 대수적 도구를 한 곳에 모은다.

**스칼라 필드 FR**:
  bn128 곡선의 스칼라 필드. 멤버는 모두 FR 원소로 인코딩되며,
  누산값은 G1 생성자에 멤버들의 곱을 스칼라 곱한 점이다.

**G1 / G2 / 페어링**:
  누산값과 증인(witness)은 G1 위의 점, 검증 시 사용하는 두 번째 생성자는
  G2 위의 점이다. 멤버십 검증은 optimal Ate 페어링의 등식 검사로 이루어진다.

사용 예시:
    >>> from zkp.accumulator.field import FR, G1, ec_mul
    >>> P = ec_mul(G1, FR(5))  # 5·G1
"""

from py_ecc.fields import bn128_FQ as FQ
from py_ecc import bn128


class FR(FQ):
    """bn128 스칼라 필드 위의 유한체 원소 (위수 = bn128.curve_order)."""
    field_modulus = bn128.curve_order


# 곡선 위수 (스칼라 필드 크기)
CURVE_ORDER = bn128.curve_order

# G1, G2 그룹 생성자
G1 = bn128.G1
G2 = bn128.G2

# G1 항등원 (무한원점)
Z1 = None


def ec_mul(point, scalar):
    """타원곡선 스칼라 곱셈: scalar · point.

    Args:
        point: G1 또는 G2 위의 점 (무한원점 None 허용)
        scalar: 정수 또는 FR 원소. CURVE_ORDER로 축소된 뒤 곱해진다.

    Returns:
        같은 그룹의 점. scalar ≡ 0 이면 무한원점(None).
    """
    if isinstance(scalar, FR):
        scalar = int(scalar)
    if point is None:
        return None
    return bn128.multiply(point, scalar % CURVE_ORDER)


def ec_pairing(g2_point, g1_point):
    """쌍선형 페어링 e(G1, G2) → GT.

    주의:
        py_ecc.bn128.pairing의 인자 순서는 (G2, G1)이다.
    """
    return bn128.pairing(g2_point, g1_point)


def is_on_g1(point):
    """point가 G1의 원소인지 확인한다.

    bn128의 G1은 cofactor가 1이므로 곡선 y² = x³ + 3 위에 있으면 G1 원소이다.
    형태가 잘못된 값(튜플이 아니거나 좌표 타입이 다른 경우)은 False.
    """
    if point is None:
        return True
    if not isinstance(point, tuple) or len(point) != 2:
        return False
    for coord in point:
        if type(coord) is not FQ:
            return False
    return bn128.is_on_curve(point, bn128.b)
