from __future__ import annotations

from conftest import make_subject
from progress_tracker.engines import StatusClassifier
from progress_tracker.models import StatusState


def test_shortfall_is_off_track_with_message(short_subject) -> None:
    status = StatusClassifier().classify(short_subject, 70)
    assert status.state == StatusState.OFF
    assert status.label == "Off Track"
    assert status.color == "red"
    assert status.message == "short by 3"
    assert status.shortfall == 3


def test_fully_scored_subject_is_on_track(full_subject) -> None:
    status = StatusClassifier().classify(full_subject, 70)
    assert status.state == StatusState.ON
    assert status.label == "On Track"
    assert status.color == "green"
    assert status.message is None


def test_comfortable_next_assessment_is_on_track(blank_subject, partial_subject) -> None:
    classifier = StatusClassifier()
    assert classifier.classify(blank_subject, 70).state == StatusState.ON     # 11/15
    assert classifier.classify(partial_subject, 70).state == StatusState.ON   # 18/25


def test_demanding_next_assessment_is_at_risk() -> None:
    # CIA2 needs ceil(28 - 6) = 22/25 = 88%
    subject = make_subject(scores=(6, None, None, None, None))
    status = StatusClassifier().classify(subject, 70)
    assert status.state == StatusState.RISK
    assert status.label == "At Risk"
    assert status.color == "amber"


def test_infeasible_next_without_shortfall_is_off_track() -> None:
    # Full marks elsewhere still reach 85 >= 70, but CIA2 alone needs 28/25
    subject = make_subject(scores=(0, None, None, None, None))
    status = StatusClassifier().classify(subject, 70)
    assert status.state == StatusState.OFF
    assert status.message is None
    assert status.shortfall == 0


def test_shortfall_takes_precedence_over_next_assessment(short_subject) -> None:
    # The next assessment is also infeasible here; the shortfall message wins
    status = StatusClassifier().classify(short_subject, 70)
    assert status.message == "short by 3"


def test_threshold_is_configurable(partial_subject) -> None:
    # 18/25 = 72% of the next assessment
    assert StatusClassifier(at_risk_threshold=71).classify(partial_subject, 70).state == StatusState.RISK
    assert StatusClassifier(at_risk_threshold=73).classify(partial_subject, 70).state == StatusState.ON
