from doc_quality_analyzer.analyzer.links import analyze_links, extract_links
from doc_quality_analyzer.linkcheck import AssumeValidLinkChecker, LinkChecker
from doc_quality_analyzer.models import Link


class RejectExternalChecker(LinkChecker):
    def check_internal(self, link: Link) -> bool:
        return True

    def check_external(self, link: Link) -> str:
        return "unreachable"


def test_internal_and_external_links_are_classified():
    """Relative targets are internal, http(s) targets external."""
    validation = analyze_links("[a](https://x.com) and [b](#y)")
    assert validation.total_links == 2
    assert validation.valid_links == 2
    assert validation.broken_links == ()
    assert [link.url for link in validation.external_links] == ["https://x.com"]
    assert [link.target for link in validation.internal_links] == ["#y"]
    assert validation.external_links[0].status == "valid"
    assert validation.internal_links[0].is_valid
    assert validation.score == 100


def test_links_report_line_numbers_in_order():
    """Links come back in document order with their lines."""
    links = extract_links("intro\n[one](docs/a.md)\n\ntext [two](http://b.org) end")
    assert [(link.text, link.url, link.line) for link in links] == [
        ("one", "docs/a.md", 2),
        ("two", "http://b.org", 4),
    ]
    assert links[0].is_internal
    assert not links[1].is_internal


def test_no_links_scores_full_marks():
    validation = analyze_links("# Heading\n\nNo links here.")
    assert validation.total_links == 0
    assert validation.score == 100


def test_malformed_link_syntax_is_ignored():
    """Only complete [text](url) pairs count as links."""
    assert analyze_links("[dangling](\n\n[text] spaced").total_links == 0
    assert analyze_links("[](empty-text)").total_links == 0
    assert analyze_links("[text] (spaced)").total_links == 0


def test_checker_verdicts_feed_broken_links_and_score():
    """Broken links reported by the checker lower the score."""
    validation = analyze_links(
        "[a](https://x.com) [b](#y)", checker=RejectExternalChecker()
    )
    assert validation.total_links == 2
    assert validation.valid_links == 1
    assert validation.score == 50
    (broken,) = validation.broken_links
    assert broken.url == "https://x.com"
    assert broken.error == "Link unreachable"


def test_default_checker_performs_no_validation():
    checker = AssumeValidLinkChecker()
    link = Link(text="x", url="https://unreachable.invalid", line=1)
    assert checker.check_external(link) == "valid"
    assert checker.check_internal(Link(text="y", url="#missing", line=1))
