import unittest

from md_release_notes.formatting.markdown import format_commit, format_markdown
from md_release_notes.grouping.group_model import AnnotatedCommit
from md_release_notes.vcs.git_client import Commit


def annotated(summary, version, tickets=()):
    return AnnotatedCommit(commit=Commit("h-" + summary, summary), version=version, tickets=tuple(tickets))


class TestFormatMarkdown(unittest.TestCase):
    def test_single_group(self) -> None:
        groups = {"2.0.0": [annotated("Fix bug", "2.0.0"), annotated("Add feature", "2.0.0")]}
        self.assertEqual(format_markdown(groups), "## Version 2.0.0\n- Fix bug\n- Add feature")

    def test_groups_sorted_descending_and_separated_by_blank_line(self) -> None:
        groups = {
            "1.2.0": [annotated("Older", "1.2.0")],
            "1.10.0": [annotated("Newer", "1.10.0")],
        }
        self.assertEqual(
            format_markdown(groups),
            "## Version 1.10.0\n- Newer\n\n## Version 1.2.0\n- Older",
        )

    def test_empty_groups_render_empty_document(self) -> None:
        self.assertEqual(format_markdown({}), "")

    def test_ticket_suffix(self) -> None:
        self.assertEqual(format_commit(annotated("Fix", "1.0.0", ["ABC-1"])), "- Fix [ABC-1]")
        self.assertEqual(format_commit(annotated("Fix", "1.0.0")), "- Fix")

    def test_ticket_suffix_is_unordered(self) -> None:
        line = format_commit(annotated("Resolves DEF-1", "1.0.0", ["DEF-1", "ABC-99"]))
        self.assertTrue(line.startswith("- Resolves DEF-1 ["))
        self.assertTrue(line.endswith("]"))
        inner = line[len("- Resolves DEF-1 ["):-1]
        self.assertEqual(set(inner.split(", ")), {"ABC-99", "DEF-1"})


if __name__ == "__main__":
    unittest.main()
