from triage_app.app import PAGES, ordered_pages, register_page


def test_ordered_pages_preferred_first():
    labels = ["Zeta", "Setup / Connection", "Solution Plan", "Alpha", "Issue Triage"]
    assert ordered_pages(labels) == ["Issue Triage", "Solution Plan", "Setup / Connection", "Alpha", "Zeta"]


def test_register_page_adds_to_registry():
    @register_page("Scratch Page")
    def scratch():
        return "ok"

    try:
        assert PAGES["Scratch Page"] is scratch
        assert scratch() == "ok"
    finally:
        PAGES.pop("Scratch Page", None)
