"""Tests for pane rendering helpers."""

from movie_ticket.rendering import badge_style, format_details, pane_placeholder


class TestFormatDetails:
    def test_plain_text_keeps_labels(self):
        text = format_details("Movie: Up\nSeats: 2\nTotal Price: $20.0")
        assert text.plain == "Movie: Up\nSeats: 2\nTotal Price: $20.0"

    def test_feature_lines_render_as_badges(self):
        """Feature lines drop the label and show the feature name as a badge."""
        text = format_details("Seats: 1\nFeature: Window Seat")
        assert text.plain == "Seats: 1\n Window Seat "
        assert any(span.style == badge_style("Feature") for span in text.spans)

    def test_unlabelled_line_is_kept(self):
        assert format_details("hello").plain == "hello"

    def test_price_labels_share_style(self):
        assert badge_style("Price") == badge_style("Total Price")


def test_placeholder_mentions_pane():
    assert pane_placeholder("Ticket Details").plain == "(ticket details will appear here)"
