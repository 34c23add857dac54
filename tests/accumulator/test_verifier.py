"""
Accumulator Membership Verification Tests
===========================================

페어링 검사 e(x·w, G2) == e(acc, G2)를 테스트한다.

테스트 범위:
  - 완전성(completeness): alice, bob, charlie 모두 검증 성공
  - 오래된(stale) 증인: 추가 멤버 이후 검증 실패
  - 위조 증인, 다른 멤버의 증인, G1 위에 없는 증인 → False
  - 누산기 밖에서 스냅샷(acc)만으로 검증
"""

import pytest
from py_ecc.fields import bn128_FQ as FQ

from zkp.accumulator.field import G1, G2, ec_mul, ec_pairing
from zkp.accumulator.accumulator import Bn254Accumulator
from zkp.accumulator.verifier import lhs, rhs, verify


class TestLhsRhs:
    def test_lhs_equals_direct_pairing(self, abc_accumulator):
        acc = abc_accumulator["acc"]
        x = abc_accumulator["scalars"][0]
        w = acc.membership_witness(x)
        assert lhs(x, w) == ec_pairing(G2, ec_mul(w, x))

    def test_rhs_equals_direct_pairing(self, abc_accumulator):
        acc = abc_accumulator["acc"]
        assert rhs(acc.acc) == ec_pairing(G2, acc.acc)


class TestCompleteness:
    """추가된 모든 멤버는 검증에 성공해야 한다."""

    def test_all_members_verify(self, abc_accumulator):
        acc = abc_accumulator["acc"]
        for i, x in enumerate(abc_accumulator["scalars"]):
            witness = acc.membership_witness(x)
            assert witness is not None, f"no witness for member index {i}"
            assert acc.verify_membership(x, witness) is True, f"proof failed for member index {i}"

    def test_duplicate_member_verifies(self):
        acc = Bn254Accumulator()
        a = acc.add_member(b"alice")
        acc.add_member(b"bob")
        acc.add_member(b"alice")
        assert acc.verify_membership(a, acc.membership_witness(a)) is True


class TestSoundness:
    """잘못된 증인은 False를 반환해야 한다."""

    def test_stale_witness_rejected(self):
        acc = Bn254Accumulator()
        x = acc.add_member(b"alice")
        acc.add_member(b"bob")
        stale = acc.membership_witness(x)
        acc.add_member(b"dave")
        assert acc.verify_membership(x, stale) is False

    def test_forged_witness_rejected(self, abc_accumulator):
        acc = abc_accumulator["acc"]
        x = abc_accumulator["scalars"][0]
        assert acc.verify_membership(x, ec_mul(G1, 9999)) is False

    def test_witness_for_other_member_rejected(self, abc_accumulator):
        acc = abc_accumulator["acc"]
        a, b, _ = abc_accumulator["scalars"]
        assert acc.verify_membership(a, acc.membership_witness(b)) is False

    def test_off_curve_witness_rejected(self, abc_accumulator):
        acc = abc_accumulator["acc"]
        x = abc_accumulator["scalars"][0]
        assert acc.verify_membership(x, (FQ(1), FQ(3))) is False

    def test_malformed_witness_rejected(self, abc_accumulator):
        acc = abc_accumulator["acc"]
        x = abc_accumulator["scalars"][0]
        assert acc.verify_membership(x, "not a point") is False
        assert acc.verify_membership(x, G2) is False


class TestStandaloneVerify:
    """누산기 인스턴스 없이 acc 스냅샷만으로 검증한다."""

    def test_snapshot_verify(self, abc_accumulator):
        acc = abc_accumulator["acc"]
        snapshot = acc.acc
        x = abc_accumulator["scalars"][2]
        witness = acc.membership_witness(x)
        assert verify(snapshot, int(x), witness) is True

    def test_off_curve_snapshot_rejected(self, abc_accumulator):
        acc = abc_accumulator["acc"]
        x = abc_accumulator["scalars"][2]
        witness = acc.membership_witness(x)
        assert verify((FQ(1), FQ(3)), x, witness) is False
        assert verify("not a point", x, witness) is False

    def test_verify_does_not_mutate(self):
        acc = Bn254Accumulator()
        x = acc.add_member(b"alice")
        acc.add_member(b"bob")
        before = acc.acc
        acc.verify_membership(x, ec_mul(G1, 1234))
        assert acc.acc == before
        assert len(acc) == 2
