"""
누산기 데모: 멤버 추가 → 증인 생성 → 멤버십 검증
====================================================

실행:
    python -m zkp.accumulator.example

흐름:
    1. member1, member2, member3 추가
    2. 현재 누산값 출력
    3. member2의 증인 생성 및 검증
    4. 추가되지 않은 멤버는 증인이 없음을 확인
"""

from zkp.accumulator.accumulator import Bn254Accumulator

from accumulator_serializers import g1_short, fr_short


def main(members=(b"member1", b"member2", b"member3")):
    print("=" * 60)
    print("  bn128 Accumulator Demo")
    print("=" * 60)

    acc = Bn254Accumulator()

    # ── 1. 멤버 추가 ──
    print("\n[1] 멤버 추가...")
    scalars = []
    for m in members:
        x = acc.add_member(m)
        scalars.append(x)
        print(f"    {m.decode()} → x = {fr_short(x)}")

    print(f"\n    현재 누산값: {g1_short(acc.acc)}")

    # ── 2. 증인 생성 및 검증 ──
    target = scalars[len(scalars) // 2]
    print(f"\n[2] 증인 생성 (x = {fr_short(target)})...")
    witness = acc.membership_witness(target)
    print(f"    증인: {g1_short(witness)}")

    result = acc.verify_membership(target, witness)
    print(f"    검증 결과: {'성공 ✓' if result else '실패 ✗'}")

    # ── 3. 비멤버 ──
    print("\n[3] 비멤버 (mallory)...")
    fake = Bn254Accumulator.hash_to_scalar(b"mallory")
    fake_witness = acc.membership_witness(fake)
    print(f"    증인: {'없음 (예상대로)' if fake_witness is None else g1_short(fake_witness)}")

    print("\n" + "=" * 60)

    return result and fake_witness is None


if __name__ == "__main__":
    main()
