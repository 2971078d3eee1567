from triage_app.core.priority import map_priority, normalize_criticality


def test_priority_mapping():
    assert map_priority("critical") == 4
    assert map_priority("high") == 3
    assert map_priority("medium") == 2
    assert map_priority("low") == 1


def test_normalize_criticality():
    assert normalize_criticality("  HIGH ") == "high"
    assert normalize_criticality("Blocker") == "critical"
    assert normalize_criticality("1") == "low"
    assert normalize_criticality(None) == "medium"
    assert normalize_criticality("whatever") == "medium"
    assert map_priority("Minor") == 1
