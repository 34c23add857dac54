"""
누산기 데이터 직렬화/역직렬화 헬퍼
====================================

FR, G1, G2 값과 누산기 상태를 JSON으로 옮길 수 있는 형태로 변환한다.
저장이나 전송 자체는 호출하는 쪽에서 담당한다.
"""

from py_ecc import bn128
from py_ecc.fields import bn128_FQ as FQ

from zkp.accumulator.field import FR, ec_mul, is_on_g1
from zkp.accumulator.accumulator import Bn254Accumulator


# ─── 파싱 헬퍼 ───

def _pair(data):
    """길이 2의 리스트/튜플인지 확인한다."""
    if not isinstance(data, (list, tuple)) or len(data) != 2:
        raise ValueError(f"길이 2의 리스트가 필요합니다: {data!r}")
    return data


def _to_int(s):
    try:
        return int(s)
    except (TypeError, ValueError) as e:
        raise ValueError(f"정수 문자열이 아닙니다: {s!r}") from e


# ─── FR ───

def serialize_fr(val):
    """FR → str(int)"""
    return str(int(val))


def deserialize_fr(s):
    """str(int) → FR"""
    return FR(_to_int(s))


# ─── G1 point ───

def serialize_g1(point):
    """G1 point → [str, str] or None"""
    if point is None:
        return None
    return [str(int(point[0])), str(int(point[1]))]


def deserialize_g1(data):
    """[str, str] or None → G1 point"""
    if data is None:
        return None
    x, y = _pair(data)
    point = (FQ(_to_int(x)), FQ(_to_int(y)))
    if not is_on_g1(point):
        raise ValueError("G1 위의 점이 아닙니다")
    return point


# ─── G2 point ───

def serialize_g2(point):
    """G2 point → [[str,str],[str,str]] or None"""
    if point is None:
        return None
    return [
        [str(int(point[0].coeffs[0])), str(int(point[0].coeffs[1]))],
        [str(int(point[1].coeffs[0])), str(int(point[1].coeffs[1]))]
    ]


def deserialize_g2(data):
    """[[str,str],[str,str]] or None → G2 point"""
    if data is None:
        return None
    x, y = _pair(data)
    point = (
        bn128.FQ2([_to_int(c) for c in _pair(x)]),
        bn128.FQ2([_to_int(c) for c in _pair(y)])
    )
    if not bn128.is_on_curve(point, bn128.b2):
        raise ValueError("G2 위의 점이 아닙니다")
    return point


# ─── Accumulator ───

def serialize_accumulator(acc):
    """Bn254Accumulator → dict"""
    return {
        "g1": serialize_g1(acc.g1),
        "g2": serialize_g2(acc.g2),
        "acc": serialize_g1(acc.acc),
        "members": [serialize_fr(x) for x in acc.members],
    }


def deserialize_accumulator(data):
    """dict → Bn254Accumulator

    생성자는 항상 표준 생성자를 사용하므로 g1, g2가 다르면 거부한다.
    복원 후 acc == (∏ members)·G1 이 성립하지 않으면 거부한다.
    """
    if not isinstance(data, dict):
        raise ValueError("누산기 스냅샷은 dict여야 합니다")
    missing = [k for k in ("g1", "g2", "acc", "members") if k not in data]
    if missing:
        raise ValueError(f"누산기 스냅샷에 키가 없습니다: {missing}")
    if not isinstance(data["members"], list):
        raise ValueError("members는 리스트여야 합니다")

    acc = Bn254Accumulator()
    if deserialize_g1(data["g1"]) != acc.g1 or deserialize_g2(data["g2"]) != acc.g2:
        raise ValueError("표준 생성자가 아닙니다")
    acc.acc = deserialize_g1(data["acc"])
    acc.members = [deserialize_fr(s) for s in data["members"]]

    product = FR(1)
    for x in acc.members:
        product = product * x
    if ec_mul(acc.g1, product) != acc.acc:
        raise ValueError("acc가 members의 곱과 일치하지 않습니다")
    return acc


# ─── display helpers ───

def _shorten(s):
    if len(s) <= 8:
        return s
    return s[:4] + "..." + s[-4:]


def g1_short(point):
    """G1 point → 축약 문자열 (출력용)"""
    if point is None:
        return "∞"
    return f"({_shorten(str(int(point[0])))}, {_shorten(str(int(point[1])))})"


def fr_short(val):
    """FR → 축약 문자열 (출력용)"""
    if val is None:
        return "None"
    s = str(int(val))
    if len(s) <= 10:
        return s
    return s[:4] + "..." + s[-4:]
