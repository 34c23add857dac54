"""
bn128 쌍선형 누산기 (Bilinear Accumulator)
=============================================

멤버 집합(중복 허용)에 대한 간결한 커밋먼트를 G1 점 하나로 유지한다.

**누산 규칙**:
  acc₀ = G1
  accₙ = xₙ · accₙ₋₁        (점 덧셈이 아닌 스칼라 곱)
  ⇒ acc = (x₁·x₂·…·xₙ) · G1

  스칼라 곱은 교환 가능하므로 추가 순서와 무관하게 같은 누산값이 나온다.

**증인(witness)**:
  w(x) = (∏ members \\ {x 한 번}) · G1
  x가 여러 번 추가되었다면 첫 번째 등장 하나만 제외한다.
  역원 계산 없이 나머지 멤버들의 곱만으로 구성한다.

**검증**:
  e(x·w, G2) == e(acc, G2)  (zkp.accumulator.verifier 참고)

사용 예시:
    >>> acc = Bn254Accumulator()
    >>> x = acc.add_member(b"alice")
    >>> w = acc.membership_witness(x)
    >>> acc.verify_membership(x, w)  # True
"""

import logging

from zkp.accumulator.field import FR, G1, G2, ec_mul
from zkp.accumulator.hashing import hash_to_scalar
from zkp.accumulator.verifier import verify

logger = logging.getLogger(__name__)


class Bn254Accumulator:
    """bn128 곡선 위의 누산기.

    속성:
        g1: G1 생성자
        g2: G2 생성자 (검증용)
        acc: 현재 누산값 (G1 점)
        members: 추가된 멤버 스칼라 리스트 (추가 순서, 중복 포함)
    """

    hash_to_scalar = staticmethod(hash_to_scalar)

    def __init__(self):
        self.g1 = G1
        self.g2 = G2
        self.acc = self.g1
        self.members = []

    def __len__(self):
        return len(self.members)

    def add_member(self, member):
        """멤버를 누산기에 추가하고 인코딩된 스칼라를 반환한다.

        Args:
            member: 멤버 바이트열

        Returns:
            FR: hash_to_scalar(member). 이후 증인 요청에 사용한다.

        주의:
            스칼라가 0이면 누산값이 무한원점이 된다. 거부하지 않는다.
        """
        x = hash_to_scalar(member)
        if x == FR(0):
            logger.warning("member encodes to the zero scalar, accumulator collapses to infinity")
        self.acc = ec_mul(self.acc, x)
        self.members.append(x)
        logger.debug("added member #%d", len(self.members))
        return x

    def membership_witness(self, x):
        """x의 멤버십 증인을 계산한다.

        members를 순서대로 훑으며 x와 같은 첫 번째 원소만 건너뛰고
        나머지를 모두 곱한다.

        Args:
            x: 멤버 스칼라 (FR 또는 정수)

        Returns:
            G1 점 (증인), x가 members에 없으면 None
        """
        if not isinstance(x, FR):
            x = FR(x)

        product = FR(1)
        found = False
        for xi in self.members:
            if not found and xi == x:
                found = True
                continue
            product = product * xi

        if not found:
            logger.debug("no witness: scalar is not a member")
            return None
        return ec_mul(self.g1, product)

    def verify_membership(self, x, witness):
        """현재 누산값에 대해 증인을 검증한다."""
        return verify(self.acc, x, witness, self.g2)
