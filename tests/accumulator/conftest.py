import sys
import os
import pytest

# 프로젝트 루트를 sys.path에 추가
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from zkp.accumulator.accumulator import Bn254Accumulator


# ── 테스트 상수 ──
MEMBERS = [b"alice", b"bob", b"charlie"]
NON_MEMBER = b"mallory"


@pytest.fixture(scope="session")
def members():
    """추가 순서대로의 멤버 바이트열."""
    return list(MEMBERS)


@pytest.fixture(scope="session")
def non_member():
    """한 번도 추가되지 않는 멤버."""
    return NON_MEMBER


@pytest.fixture(scope="session")
def abc_accumulator(members):
    """alice, bob, charlie 순서로 추가한 누산기와 각 스칼라.

    세션 전체에서 공유하므로 테스트에서 add_member를 호출하지 않는다.
    """
    acc = Bn254Accumulator()
    scalars = [acc.add_member(m) for m in members]
    return {"acc": acc, "scalars": scalars}


@pytest.fixture
def fresh_accumulator():
    """비어 있는 새 누산기."""
    return Bn254Accumulator()
