"""
Unit tests for mistake classification (mistakes/classifier.py).
Uses hand-built alignment ops; no text processing involved.
Run: python -m pytest tests/test_mistake_classifier.py -v
"""
import unittest

from alignment.word_alignment import AlignmentOp
from core.similarity import WordSimilarityJudge
from mistakes import (
    MistakeSeverity,
    MistakeType,
    TextMistake,
    classify_alignment,
    mistake_type_for,
    severity_for_distance,
)


class TestClassifyAlignment(unittest.TestCase):
    """Alignment ops -> TextMistake list with positions and severities."""

    def setUp(self):
        self.judge = WordSimilarityJudge()

    def test_all_match_no_mistakes(self):
        ops = [AlignmentOp.match("con", "con"), AlignmentOp.match("mèo", "mèo")]
        self.assertEqual(classify_alignment(ops, self.judge), [])

    def test_omission(self):
        ops = [AlignmentOp.match("con", "con"), AlignmentOp.deletion("mèo")]
        mistakes = classify_alignment(ops, self.judge)
        self.assertEqual(len(mistakes), 1)
        m = mistakes[0]
        self.assertEqual(m.position, 1)
        self.assertEqual(m.expected_word, "mèo")
        self.assertEqual(m.actual_word, "")
        self.assertEqual(m.mistake_type, MistakeType.OMISSION)
        self.assertEqual(m.severity, MistakeSeverity.MODERATE)

    def test_insertion(self):
        ops = [AlignmentOp.insertion("nhỏ")]
        m = classify_alignment(ops, self.judge)[0]
        self.assertEqual(m.position, 0)
        self.assertEqual(m.expected_word, "")
        self.assertEqual(m.actual_word, "nhỏ")
        self.assertEqual(m.mistake_type, MistakeType.INSERTION)
        self.assertEqual(m.severity, MistakeSeverity.MINOR)

    def test_substitution_severity_from_distance(self):
        m = classify_alignment([AlignmentOp.substitution("thảm", "ghế")], self.judge)[0]
        self.assertEqual(m.mistake_type, MistakeType.SUBSTITUTION)
        self.assertEqual(m.severity, MistakeSeverity.MAJOR)

        m = classify_alignment([AlignmentOp.substitution("ab", "ac")], self.judge)[0]
        self.assertEqual(m.mistake_type, MistakeType.SUBSTITUTION)
        self.assertEqual(m.severity, MistakeSeverity.MINOR)

    def test_mispronunciation(self):
        m = classify_alignment([AlignmentOp.substitution("sasas", "xaxax")], self.judge)[0]
        self.assertEqual(m.mistake_type, MistakeType.MISPRONUNCIATION)
        self.assertEqual(m.severity, MistakeSeverity.MAJOR)

    def test_positions_count_matches(self):
        ops = [
            AlignmentOp.match("con", "con"),
            AlignmentOp.deletion("mèo"),
            AlignmentOp.match("ngồi", "ngồi"),
            AlignmentOp.insertion("nhỏ"),
        ]
        self.assertEqual([m.position for m in classify_alignment(ops, self.judge)], [1, 3])


class TestSeverityAndType(unittest.TestCase):
    """Severity from edit distance; type from the word pair."""

    def test_severity_for_distance(self):
        self.assertEqual(severity_for_distance(0), MistakeSeverity.MINOR)
        self.assertEqual(severity_for_distance(1), MistakeSeverity.MINOR)
        self.assertEqual(severity_for_distance(2), MistakeSeverity.MODERATE)
        self.assertEqual(severity_for_distance(3), MistakeSeverity.MAJOR)
        self.assertEqual(severity_for_distance(10), MistakeSeverity.MAJOR)

    def test_mistake_type_for(self):
        judge = WordSimilarityJudge()
        self.assertEqual(mistake_type_for("trời", "chời", judge), MistakeType.MISPRONUNCIATION)
        self.assertEqual(mistake_type_for("mèo", "chó", judge), MistakeType.SUBSTITUTION)

    def test_score_impact(self):
        self.assertEqual(MistakeSeverity.MINOR.score_impact, 0.05)
        self.assertEqual(MistakeSeverity.MODERATE.score_impact, 0.10)
        self.assertEqual(MistakeSeverity.MAJOR.score_impact, 0.20)

    def test_localized_names(self):
        self.assertEqual(MistakeType.OMISSION.localized_name, "Bỏ sót")
        self.assertEqual(MistakeSeverity.MAJOR.localized_name, "Nặng")


class TestTextMistakeDisplay(unittest.TestCase):
    """Vietnamese display text and dict export."""

    def test_description_and_suggestion(self):
        m = TextMistake(0, "thảm", "ghế", MistakeType.SUBSTITUTION, MistakeSeverity.MAJOR)
        self.assertEqual(m.description, "Đọc 'thảm' thành 'ghế'")
        self.assertEqual(m.suggestion, "Từ đúng là 'thảm', không phải 'ghế'")

        omission = TextMistake(1, "mèo", "", MistakeType.OMISSION, MistakeSeverity.MODERATE)
        self.assertEqual(omission.description, "Bỏ sót từ 'mèo'")

        extra = TextMistake(2, "", "nhỏ", MistakeType.INSERTION, MistakeSeverity.MINOR)
        self.assertEqual(extra.suggestion, "Không cần đọc thêm từ 'nhỏ'")

    def test_to_dict(self):
        m = TextMistake(3, "trời", "chời", MistakeType.MISPRONUNCIATION, MistakeSeverity.MODERATE)
        d = m.to_dict()
        self.assertEqual(d["position"], 3)
        self.assertEqual(d["mistake_type"], "mispronunciation")
        self.assertEqual(d["severity"], "moderate")
        self.assertIn("trời", d["description"])


if __name__ == "__main__":
    unittest.main()
