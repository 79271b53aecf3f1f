"""Unit tests for frequency keyword extraction."""

from rsvp_reader.core.keywords import STOPWORDS, extract_keywords


class TestExtractKeywords:
    def test_ranked_by_frequency(self):
        text = "python code python tests python code"
        assert extract_keywords(text) == ["python", "code", "tests"]

    def test_ties_keep_first_occurrence_order(self):
        assert extract_keywords("beta alpha gamma") == ["beta", "alpha", "gamma"]

    def test_stopwords_compared_in_lower_case(self):
        keywords = extract_keywords("The the THE notes And notes")
        assert keywords == ["notes"]

    def test_single_characters_excluded(self):
        assert extract_keywords("x y z xy") == ["xy"]

    def test_case_preserved_and_counted_separately(self):
        assert extract_keywords("Python python Python") == ["Python", "python"]

    def test_limit(self):
        text = " ".join("word{}".format(i) for i in range(20))
        assert len(extract_keywords(text)) == 10
        assert extract_keywords(text, limit=3) == ["word0", "word1", "word2"]

    def test_chinese_text(self):
        assert extract_keywords("阅读的方法，阅读的技巧") == ["阅读", "方法，", "技巧"]

    def test_empty_text(self):
        assert extract_keywords("") == []

    def test_deterministic(self):
        text = "知识 管理 notes notes 知识管理"
        assert extract_keywords(text) == extract_keywords(text)

    def test_stopword_set_has_both_scripts(self):
        assert "的" in STOPWORDS
        assert "the" in STOPWORDS
