from smartattend.analytics.classifier.threshold_classifier import ThresholdRiskClassifier
from smartattend.analytics.model import BatchAnalytics, StudentStats
from smartattend.core.enums import Standing


def stats(student_id: str, rate: float) -> StudentStats:
    return StudentStats(
        student_id=student_id,
        name=student_id,
        email=None,
        photo_url=None,
        present_count=0,
        absent_count=0,
        late_count=0,
        rate=rate,
        standing=Standing.GOOD,
    )


def test_below_threshold_is_at_risk_only_when_classes_were_held():
    classifier = ThresholdRiskClassifier()

    assert classifier.is_at_risk(stats("s1", 74.99), total_classes_held=4)
    assert not classifier.is_at_risk(stats("s1", 75), total_classes_held=4)
    assert not classifier.is_at_risk(stats("s1", 0), total_classes_held=0)


def test_at_risk_keeps_worst_first_order():
    analytics = BatchAnalytics(
        batch_id="b1",
        start="2026-02-01",
        end="2026-02-28",
        total_classes_held=4,
        total_present=6,
        overall_rate=50,
        per_student=[stats("s3", 0), stats("s1", 25), stats("s2", 50), stats("s4", 100)],
    )

    at_risk = ThresholdRiskClassifier().at_risk(analytics)

    assert [s.student_id for s in at_risk] == ["s3", "s1", "s2"]


def test_custom_threshold():
    classifier = ThresholdRiskClassifier(threshold=50)

    assert not classifier.is_at_risk(stats("s1", 60), total_classes_held=2)
    assert classifier.is_at_risk(stats("s1", 49), total_classes_held=2)
