"""Unit tests for the qapress.digest.render module."""

from qapress.digest.render import print_question, print_questions
from qapress.store import Question


def _question(**kw):
    data = dict(
        id=1,
        title="Is evolution supported in the Bible?",
        body="Bible and *evolution* discussion.",
        html="<p>Bible and <em>evolution</em> discussion.</p>",
        created_at="2024-12-29T12:00:00.000000+00:00",
        tags=("Bible", "Science"),
    )
    data.update(kw)
    return Question(**data)


class TestPrintQuestions:
    def test_empty_list(self):
        print_questions([])

    def test_rows(self, capsys):
        print_questions([_question(), _question(id=2, title="[bold]markup[/bold]", tags=())])
        out = capsys.readouterr().out
        assert "Is evolution" in out
        assert "[bold]markup[/bold]" in out


class TestPrintQuestion:
    def test_body(self, capsys):
        print_question(_question())
        out = capsys.readouterr().out
        assert "#1" in out
        assert "Bible, Science" in out
        assert "*evolution*" in out

    def test_html(self, capsys):
        print_question(_question(tags=()), show_html=True)
        out = capsys.readouterr().out
        assert "<em>evolution</em>" in out
        assert "(none)" in out
