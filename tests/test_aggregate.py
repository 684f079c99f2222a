"""Test summing of match scores over every MatchDetails shape."""

from match_json.transform.aggregate import total_match_score
from match_json.transform.tree import ObjectNode, from_python, parse_document


def _total(xml, sink):
    return total_match_score(parse_document(xml), log=sink)


def test_missing_match_details_is_zero_with_warning(make_xml, sink):
    assert _total(make_xml(), sink) == 0
    assert sink.events("warning") == ["MatchDetails node is missing in the XML"]


def test_single_match(make_xml, sink):
    xml = make_xml("<MatchDetails><Match><Score>35</Score></Match></MatchDetails>")
    assert _total(xml, sink) == 35


def test_repeated_matches(make_xml, sink):
    xml = make_xml(
        "<MatchDetails>"
        "<Match><Entity>John</Entity><Score>35</Score></Match>"
        "<Match><Entity>Doe</Entity><Score>50</Score></Match>"
        "</MatchDetails>"
    )
    assert _total(xml, sink) == 85
    assert sink.records == []


def test_repeated_match_details_groups(make_xml, sink):
    xml = make_xml(
        "<MatchDetails><Match><Score>1</Score></Match></MatchDetails>"
        "<MatchDetails><Match><Score>2</Score></Match><Match><Score>3</Score></Match></MatchDetails>"
    )
    assert _total(xml, sink) == 6


def test_malformed_score_is_skipped(make_xml, sink):
    xml = make_xml(
        "<MatchDetails>"
        "<Match><Score>abc</Score></Match>"
        "<Match><Score>10</Score></Match>"
        "</MatchDetails>"
    )
    assert _total(xml, sink) == 10
    assert sink.events("warning") == ["Invalid score value encountered, skipping"]


def test_match_without_score_contributes_nothing(make_xml, sink):
    xml = make_xml(
        "<MatchDetails>"
        "<Match><Entity>John</Entity></Match>"
        "<Match><Score>4</Score></Match>"
        "</MatchDetails>"
    )
    assert _total(xml, sink) == 4
    assert len(sink.events("warning")) == 1


def test_empty_match_details(make_xml, sink):
    assert _total(make_xml("<MatchDetails />"), sink) == 0


def test_existing_summary_does_not_feed_the_total(make_xml, sink):
    xml = make_xml(
        "<MatchDetails><Match><Score>5</Score></Match></MatchDetails>",
        extra="<MatchSummary><TotalMatchScore>1000</TotalMatchScore></MatchSummary>",
    )
    assert _total(xml, sink) == 5


def test_large_scores_do_not_overflow(make_xml, sink):
    xml = make_xml(
        "<MatchDetails>"
        "<Match><Score>99999999999999999999</Score></Match>"
        "<Match><Score>99999999999999999999</Score></Match>"
        "</MatchDetails>"
    )
    assert _total(xml, sink) == 199999999999999999998


class _ExplodingMatch(ObjectNode):
    def get(self, key):
        raise RuntimeError("boom")


def test_unexpected_failure_returns_partial_total(sink):
    tree = from_python({"ResultBlock": {"MatchDetails": {}}})
    details = tree.get("ResultBlock").get("MatchDetails")
    details.set("Match", from_python([{"Score": "7"}]))
    details.get("Match").items.append(_ExplodingMatch())

    assert total_match_score(tree, log=sink) == 7
    assert sink.events("error") == ["Error while calculating total match score"]
    _, _, fields = sink.records[-1]
    assert fields["partial_total"] == "7"


def test_very_long_score_does_not_drop_later_scores(make_xml, sink):
    xml = make_xml(
        "<MatchDetails>"
        f"<Match><Score>1{'0' * 5000}</Score></Match>"
        "<Match><Score>7</Score></Match>"
        "</MatchDetails>"
    )
    assert _total(xml, sink) == 10 ** 5000 + 7
    assert sink.events("error") == []
