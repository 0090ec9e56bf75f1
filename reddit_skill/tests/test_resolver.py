"""Tests for the resolver module."""

import unittest

from reddit_skill.resolver import (
    UnsupportedTopicError,
    category_for,
    combine_phrase,
    get_subreddit,
    resolve_topic,
)


class TestGetSubreddit(unittest.TestCase):
    """Test cases for the unvalidated path builder."""

    def test_multi_word_topic(self):
        self.assertEqual(get_subreddit("world news"), "r/worldnews/")

    def test_single_word_topic(self):
        self.assertEqual(get_subreddit("jokes"), "r/jokes/")

    def test_removes_every_space_between_words(self):
        """No embedded whitespace survives, whatever the word count."""
        for phrase in ["today i learned", "a b c d e", "explain like im five"]:
            path = get_subreddit(phrase)
            self.assertNotIn(" ", path)
            self.assertEqual(path, "r/" + phrase.replace(" ", "") + "/")

    def test_leading_and_trailing_spaces(self):
        self.assertEqual(get_subreddit("  world news "), "r/worldnews/")

    def test_empty_topic_is_degenerate(self):
        self.assertEqual(get_subreddit(""), "r//")

    def test_is_pure(self):
        """Same input, same output."""
        self.assertEqual(get_subreddit("world news"), get_subreddit("world news"))

    def test_combine_phrase(self):
        self.assertEqual(combine_phrase("today i learned"), "todayilearned")


class TestResolveTopic(unittest.TestCase):
    """Test cases for allow-list resolution."""

    def setUp(self):
        self.supported = ["news", "world news", "jokes"]

    def test_supported_topic(self):
        self.assertEqual(resolve_topic("world news", self.supported), "r/worldnews/")

    def test_case_and_spacing_insensitive(self):
        self.assertEqual(resolve_topic("World  News", self.supported), "r/worldnews/")
        self.assertEqual(resolve_topic("worldnews", self.supported), "r/worldnews/")

    def test_unsupported_topic(self):
        with self.assertRaises(UnsupportedTopicError) as ctx:
            resolve_topic("cats", self.supported)
        self.assertEqual(ctx.exception.topic, "cats")

    def test_missing_topic(self):
        for topic in [None, "", "   "]:
            with self.assertRaises(UnsupportedTopicError):
                resolve_topic(topic, self.supported)

    def test_empty_allow_list_accepts_any_topic(self):
        self.assertEqual(resolve_topic("today i learned", []), "r/todayilearned/")

    def test_category_for(self):
        self.assertEqual(category_for("World News"), "worldnews")
        self.assertEqual(category_for("jokes"), "jokes")


if __name__ == "__main__":
    unittest.main()
