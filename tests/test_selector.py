"""Tests for adjective selection."""

import random

import pytest

from adjective_agent.constants import LEGACY_THEME_RULES, SEED_CATEGORIES, THEME_RULES
from adjective_agent.core import AdjectiveSelector, dedupe, match_themes
from adjective_agent.models import Photo

SUNSET_WORDS = ["golden", "warm", "radiant", "glowing", "fiery", "amber", "crimson"]
NIGHT_WORDS = ["mysterious", "shadowy", "ethereal", "nocturnal", "twilight", "starry", "moonlit"]


@pytest.fixture
def selector(store, rng):
    """Create a selector over the fresh store."""
    return AdjectiveSelector(store, rng=rng)


class TestDedupe:
    """Tests for order-preserving de-duplication."""

    def test_keeps_first_occurrence(self):
        """Test duplicates are dropped after their first occurrence."""
        assert dedupe(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]


class TestMatchThemes:
    """Tests for theme rules."""

    def test_sunset_in_title(self):
        """Test a sunset title triggers the sunset bundle."""
        assert match_themes(Photo(id="p", title="Golden SUNSET"), THEME_RULES) == SUNSET_WORDS

    def test_sunrise_in_description(self):
        """Test sunrise in the description also triggers the sunset bundle."""
        assert match_themes(Photo(id="p", description="Early sunrise"), THEME_RULES) == SUNSET_WORDS

    def test_night_substring(self):
        """Test markers match as substrings."""
        assert match_themes(Photo(id="p", title="Darkness falls"), THEME_RULES) == NIGHT_WORDS

    def test_nature_tag_exact(self):
        """Test tag markers must match a whole tag."""
        assert "pristine" in match_themes(Photo(id="p", tags=["Forest"]), THEME_RULES)
        assert match_themes(Photo(id="p", tags=["forests"]), THEME_RULES) == []

    def test_nature_ignores_description(self):
        """Test the nature rule does not scan the description."""
        assert match_themes(Photo(id="p", description="A forest trail"), THEME_RULES) == []

    def test_multiple_themes(self):
        """Test all matching bundles are appended in rule order."""
        words = match_themes(Photo(id="p", title="City at night", tags=["river"]), THEME_RULES)
        assert words[:7] == NIGHT_WORDS
        assert words[7] == "urban"
        assert words[-1] == "rippling"
        assert len(words) == 21

    def test_legacy_rules_title_only(self):
        """Test the legacy rules only scan the title."""
        assert match_themes(Photo(id="p", title="Sunset"), LEGACY_THEME_RULES) == ["golden", "warm", "radiant"]
        assert match_themes(Photo(id="p", description="sunset"), LEGACY_THEME_RULES) == []


class TestSelect:
    """Tests for the full selection."""

    def test_existing_first(self, selector):
        """Test existing words lead the result in their given order."""
        words = selector.select(Photo(id="p", title="Sunset"), ["lovely", "beautiful"], 10)
        assert words[:5] == ["lovely", "beautiful", "golden", "warm", "radiant"]

    def test_cap_respected(self, selector):
        """Test the result never exceeds the cap."""
        photo = Photo(id="p", title="Sunset at night by the river", tags=["forest", "city"])
        assert len(selector.select(photo, [], 5)) == 5

    @pytest.mark.parametrize("max_words", [0, -3])
    def test_non_positive_cap(self, selector, max_words):
        """Test a zero or negative cap returns nothing."""
        assert selector.select(Photo(id="p", title="Sunset"), [], max_words) == []

    def test_no_padding(self, selector):
        """Test fewer available words than the cap returns them all."""
        words = selector.select(Photo(id="p"), [], 100)
        assert words == ["serene", "luminous", "timeless", "expansive", "inspiring"]

    def test_no_duplicates(self, selector, store):
        """Test words from several sources appear once."""
        store.add_word("golden", "tone", "title")
        words = selector.select(Photo(id="p", title="Sunset"), ["golden"], 50)
        assert len(words) == len(set(words))
        assert words[0] == "golden"

    def test_learned_words_follow_themes(self, selector, store):
        """Test learned words for present contexts follow the theme words."""
        store.add_word("hazy", "atmosphere", "title")
        words = selector.select(Photo(id="p", title="Sunset"), [], 20)
        assert words[: len(SUNSET_WORDS) + 1] == [*SUNSET_WORDS, "hazy"]

    def test_use_learning_off(self, selector, store):
        """Test learned words are only added when learning is on."""
        store.add_word("hazy", "atmosphere", "title")
        words = selector.select(Photo(id="p", title="Harbour"), [], 20, use_learning=False)
        # The catalog fill still draws from the atmosphere category
        assert words == ["serene", "luminous", "timeless", "expansive", "inspiring", "hazy"]


class TestLearnedWords:
    """Tests for the learned-words contribution."""

    def test_only_present_contexts(self, selector, store):
        """Test contexts whose photo field is empty contribute nothing."""
        store.add_word("hazy", "atmosphere", "title")
        store.add_word("rugged", "terrain", "description")
        store.add_word("coastal", "terrain", "general")

        assert selector.learned_words(Photo(id="p", title="x")) == ["hazy"]
        assert selector.learned_words(Photo(id="p", description="x")) == ["rugged"]
        assert selector.learned_words(Photo(id="p", tags=["x"])) == []

    def test_ranked_by_frequency(self, selector, store):
        """Test more frequent words come first."""
        store.add_word("hazy", "atmosphere", "title")
        store.add_word("misty", "atmosphere", "title")
        store.add_word("misty", "atmosphere", "title")

        assert selector.learned_words(Photo(id="p", title="x")) == ["misty", "hazy"]
        assert selector.learned_words(Photo(id="p", title="x"), prefer_frequent=False) == ["hazy", "misty"]

    def test_limited_to_five(self, selector, store):
        """Test at most five learned words are contributed."""
        for word in ("hazy", "misty", "foggy", "rainy", "stormy", "windy"):
            store.add_word(word, "weather", "description")
        assert len(selector.learned_words(Photo(id="p", description="x"))) == 5

    def test_deduplicated_across_contexts(self, selector, store):
        """Test a word learned under two present contexts is counted once."""
        store.add_word("hazy", "atmosphere", "title")
        store.add_word("hazy", "atmosphere", "description")
        assert selector.learned_words(Photo(id="p", title="x", description="y")) == ["hazy"]


class TestCatalogWords:
    """Tests for the catalog fill."""

    def test_first_word_on_ties(self, selector):
        """Test the first catalog word wins when nothing has been used."""
        assert selector.catalog_words([]) == ["serene", "luminous", "timeless", "expansive", "inspiring"]

    def test_prefers_frequent(self, selector, store):
        """Test the most used word of a category is picked."""
        store.add_word("dramatic", "mood", "general")
        assert selector.catalog_words([])[0] == "dramatic"

    def test_exclusions(self, selector):
        """Test excluded words are skipped."""
        assert selector.catalog_words(["serene"])[0] == "vibrant"

    def test_exhausted_category_skipped(self, store, rng):
        """Test a category with no eligible word contributes nothing."""
        store.add_word("hazy", "atmosphere", "general")
        selector = AdjectiveSelector(store, rng=rng)
        assert "hazy" not in selector.catalog_words(["hazy"])
        assert len(selector.catalog_words(["hazy"])) == 5

    def test_random_pick_from_category(self, selector):
        """Test random picks come from each category in order."""
        picked = selector.catalog_words([], prefer_frequent=False)
        assert len(picked) == 5
        for word, words in zip(picked, SEED_CATEGORIES.values()):
            assert word in words

    def test_random_pick_reproducible(self, store):
        """Test equally seeded random sources pick the same words."""
        first = AdjectiveSelector(store, rng=random.Random(3)).catalog_words([], prefer_frequent=False)
        second = AdjectiveSelector(store, rng=random.Random(3)).catalog_words([], prefer_frequent=False)
        assert first == second


class TestSelectLegacy:
    """Tests for the legacy selection path."""

    def test_sunset_title(self, selector):
        """Test a sunset title yields the short bundle and one word per seed category."""
        words = selector.select_legacy(Photo(id="p", title="Sunset"), [], 10)
        assert words[:3] == ["golden", "warm", "radiant"]
        assert len(words) == 8

    def test_ignores_learned_categories(self, selector, store):
        """Test categories created at runtime are not drawn from."""
        store.add_word("hazy", "atmosphere", "title")
        words = selector.select_legacy(Photo(id="p", title="Harbour"), [], 10)
        assert "hazy" not in words
        assert len(words) == 5

    def test_existing_excluded_from_catalog(self, selector):
        """Test existing words are not picked again."""
        words = selector.select_legacy(Photo(id="p"), ["serene"], 10)
        assert words[0] == "serene"
        assert words.count("serene") == 1

    def test_non_positive_cap(self, selector):
        """Test a zero cap returns nothing."""
        assert selector.select_legacy(Photo(id="p", title="Sunset"), [], 0) == []
