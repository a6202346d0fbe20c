"""
Driver-facing feedback text, keyed by (measurement, status).

Text is shipped in the deployment language (Korean). Swap or patch the table
with merge_feedback_table() for another locale; classification never looks
at the text.
"""
import copy
from typing import Dict, Mapping, Optional

FeedbackTable = Dict[str, Dict[str, str]]


FEEDBACK_TEXT: FeedbackTable = {
    # Side view
    "back": {
        "good": "등받이 각도가 좋습니다.",
        "too_upright": "등받이를 조금 눕혀주세요.",
        "too_reclined": "등받이를 세워주세요.",
    },
    "knee": {
        "good": "무릎 각도가 적절합니다.",
        "too_bent": "시트를 뒤로 이동하세요 (무릎이 너무 굽혀짐).",
        "too_straight": "시트를 앞으로 당기세요 (무릎이 너무 펴짐).",
        "unknown": "다리가 잘 보이지 않습니다.",
    },
    "hip": {
        "good": "상체와 다리 각도가 안정적입니다.",
        "too_closed": "자세가 너무 웅크려졌습니다. 등받이를 눕히거나 엉덩이를 깊숙이 넣으세요.",
        "too_open": "자세가 너무 펴졌습니다.",
    },
    "elbow": {
        "good": "팔 각도가 적절합니다.",
        "too_bent": "핸들과 너무 가깝습니다.",
        "too_straight": "핸들이 너무 멉니다.",
        "unknown": "팔이 잘 보이지 않습니다.",
    },
    "height": {
        "good": "시트 높이가 적절합니다.",
        "too_high": "시트를 낮춰 엉덩이를 무릎보다 낮게 하세요.",
        "too_high_head": "머리 공간이 부족합니다. 시트를 낮추세요.",
    },
    # Front view
    "eye_level": {
        "good": "시트 높이가 적절합니다.",
        "too_low": "시트를 높여 시야를 확보하세요.",
        "too_high": "시트가 너무 높습니다. 시트를 낮추세요.",
        "unknown": "눈이 잘 보이지 않습니다.",
    },
    "distance": {
        "good": "핸들과의 거리가 적절합니다.",
        "too_close": "핸들과 너무 가깝습니다. 시트를 뒤로 이동하세요.",
        "too_far": "핸들이 너무 멉니다. 시트를 앞으로 당기세요.",
        "unknown": "팔이 잘 보이지 않습니다.",
    },
}


def feedback_for(measurement: str, status: str, table: Optional[Mapping[str, Mapping[str, str]]] = None) -> str:
    """
    Look up the text for a measurement status.

    Raises:
        KeyError: the table has no entry for (measurement, status)
    """
    table = FEEDBACK_TEXT if table is None else table
    try:
        return table[measurement][status]
    except KeyError:
        raise KeyError(f"No feedback text for {measurement}/{status}") from None


def merge_feedback_table(overrides: Mapping[str, Mapping[str, str]],
                         base: Optional[FeedbackTable] = None) -> FeedbackTable:
    """
    Return a copy of base (default FEEDBACK_TEXT) with overrides applied.

    Only known measurements and statuses may be overridden, so a typo cannot
    silently leave a status without text.
    """
    merged = copy.deepcopy(FEEDBACK_TEXT if base is None else base)
    for measurement, texts in overrides.items():
        if measurement not in merged:
            raise ValueError(f"Unknown feedback measurement: {measurement}")
        for status, text in texts.items():
            if status not in merged[measurement]:
                raise ValueError(f"Unknown feedback status for {measurement}: {status}")
            if not isinstance(text, str):
                raise ValueError(f"Feedback text for {measurement}/{status} must be a string")
            merged[measurement][status] = text
    return merged


def feedback_from_config(config) -> FeedbackTable:
    """Feedback table with the `ergonomics.feedback` overrides of a SystemConfig applied."""
    ergonomics = config.get("ergonomics")
    overrides = ergonomics.get("feedback") if ergonomics is not None else None
    if overrides is None:
        return copy.deepcopy(FEEDBACK_TEXT)
    return merge_feedback_table(overrides.to_dict())
