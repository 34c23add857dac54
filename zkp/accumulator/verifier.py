"""
멤버십 검증
=============

증인 w가 멤버 x에 대해 유효한지 페어링으로 확인한다.

**검증 방정식**:
  e(x·w, G2) == e(acc, G2)

  유효한 증인은 w = (∏_{xᵢ ≠ x} xᵢ)·G1 이므로 x·w = acc 가 성립한다.
  양변이 같은 그룹(G1)에 있으므로 G1 등식으로도 충분하지만,
  비대칭 그룹 프로토콜과의 호환을 위해 페어링 형태를 유지한다.

사용 예시:
    >>> from zkp.accumulator.verifier import verify
    >>> verify(acc.acc, x, witness)  # True / False
"""

import logging

from zkp.accumulator.field import FR, G2, ec_mul, ec_pairing, is_on_g1

logger = logging.getLogger(__name__)


def lhs(x, witness, g2=G2):
    return ec_pairing(g2, ec_mul(witness, x))


def rhs(acc, g2=G2):
    return ec_pairing(g2, acc)


def verify(acc, x, witness, g2=G2):
    """증인 witness가 누산값 acc에 대한 x의 멤버십을 증명하는지 검사한다.

    Args:
        acc: 현재 누산값 (G1 점)
        x: 멤버 스칼라 (FR 또는 정수)
        witness: membership_witness()가 반환한 G1 점
        g2: 검증용 G2 생성자

    Returns:
        bool: 검증 성공 여부. acc나 증인이 G1 위에 있지 않으면 False.
    """
    if not isinstance(x, FR):
        x = FR(x)
    if not is_on_g1(witness):
        logger.debug("witness is not a G1 point, rejecting")
        return False
    if not is_on_g1(acc):
        logger.debug("accumulator value is not a G1 point, rejecting")
        return False

    return lhs(x, witness, g2) == rhs(acc, g2)
