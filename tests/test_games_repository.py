"""
Tests for the game directory queries
"""
from datetime import datetime

import pytest

from apoxer.exceptions import ValidationException
from apoxer.repositories.games_repository import GamesRepository, escape_like
from apoxer.services.games_service import parse_game_filters


@pytest.fixture
def catalogue(factory):
    """Three games with distinct creation times, newest last"""
    return [
        factory.game('valorant', 'Valorant', genres=['FPS', 'Tactical'], platforms=['PC'],
                     created_at=datetime(2026, 1, 1, 10)),
        factory.game('elden-ring', 'Elden Ring', genres=['Action RPG'], platforms=['PC', 'PlayStation', 'Xbox'],
                     created_at=datetime(2026, 1, 2, 10)),
        factory.game('stardew-valley', 'Stardew Valley', genres=['RPG', 'Simulation'],
                     platforms=['PC', 'Nintendo Switch', 'Mobile'], created_at=datetime(2026, 1, 3, 10)),
    ]


class TestGetGames:
    """Tests for GamesRepository.get_games"""

    def test_newest_first(self, app_ctx, catalogue):
        """Games are returned newest first"""
        slugs = [game.slug for game in GamesRepository.get_games()]
        assert slugs == ['stardew-valley', 'elden-ring', 'valorant']

    def test_title_search_is_case_insensitive(self, app_ctx, catalogue):
        """Title search matches substrings regardless of case"""
        assert [game.slug for game in GamesRepository.get_games(q='VALLEY')] == ['stardew-valley']

    def test_genre_matches_whole_element(self, app_ctx, catalogue):
        """'RPG' matches the RPG genre but not 'Action RPG'"""
        assert [game.slug for game in GamesRepository.get_games(genre='rpg')] == ['stardew-valley']

    @pytest.mark.parametrize('genre', ['Échecs', 'échecs', 'ÉCHECS', ' échecs '])
    def test_genre_with_accented_letters(self, app_ctx, factory, genre):
        """Accented genre names match in any of their usual case spellings"""
        factory.game('chess-club', 'Chess Club', genres=['Échecs'])
        factory.game('dames', 'Dames', genres=['Échecs de salon'])
        assert [game.slug for game in GamesRepository.get_games(genre=genre)] == ['chess-club']

    def test_platform_filter(self, app_ctx, catalogue):
        """Only games listing the platform are returned"""
        slugs = [game.slug for game in GamesRepository.get_games(platform='PlayStation')]
        assert slugs == ['elden-ring']

    def test_filters_combine(self, app_ctx, catalogue):
        """Every supplied filter must hold"""
        assert GamesRepository.get_games(q='elden', platform='Nintendo Switch') == []
        assert [game.slug for game in GamesRepository.get_games(genre='FPS', platform='pc')] == ['valorant']

    def test_blank_filters_are_ignored(self, app_ctx, catalogue):
        """Whitespace-only filters behave as if absent"""
        assert len(GamesRepository.get_games(q='  ', genre='', platform=' ')) == 3

    def test_limit_and_offset(self, app_ctx, catalogue):
        """Pages are stable slices of the ordered list"""
        first = GamesRepository.get_games(limit=2, offset=0)
        second = GamesRepository.get_games(limit=2, offset=2)
        assert [game.slug for game in first] == ['stardew-valley', 'elden-ring']
        assert [game.slug for game in second] == ['valorant']

    def test_like_wildcards_are_literal(self, app_ctx, factory):
        """A '%' in the search text only matches a literal percent sign"""
        factory.game('hundred', '100% Orange Juice')
        factory.game('plain', 'Plain Game')
        assert [game.slug for game in GamesRepository.get_games(q='%')] == ['hundred']

    def test_empty_catalogue(self, app_ctx):
        """No games is an empty list, not an error"""
        assert GamesRepository.get_games() == []


class TestEscapeLike:
    """Tests for escape_like"""

    def test_escapes_wildcards_and_backslash(self):
        """Wildcards and the escape character are escaped"""
        assert escape_like('50%_off\\') == '50\\%\\_off\\\\'


class TestSimilarGames:
    """Tests for GamesRepository.get_similar"""

    def test_shares_a_genre_and_excludes_self(self, app_ctx, catalogue, factory):
        """Similar games share at least one genre and never include the game itself"""
        factory.game('cs2', 'Counter-Strike 2', genres=['FPS'], created_at=datetime(2026, 1, 4, 10))
        valorant = GamesRepository.get_by_slug('valorant')
        assert [game.slug for game in GamesRepository.get_similar(valorant)] == ['cs2']

    def test_respects_limit(self, app_ctx, factory):
        """No more than ``limit`` games come back"""
        base = factory.game('base', genres=['Puzzle'])
        for i in range(5):
            factory.game(f'puzzle-{i}', genres=['Puzzle'])
        assert len(GamesRepository.get_similar(base, limit=3)) == 3


class TestFacets:
    """Tests for GamesRepository.get_facets"""

    def test_distinct_sorted_values(self, app_ctx, catalogue):
        """Genres and platforms are distinct and sorted case-insensitively"""
        genres, platforms = GamesRepository.get_facets()
        assert genres == ['Action RPG', 'FPS', 'RPG', 'Simulation', 'Tactical']
        assert platforms == ['Mobile', 'Nintendo Switch', 'PC', 'PlayStation', 'Xbox']


class TestParseGameFilters:
    """Tests for parse_game_filters"""

    def test_defaults(self, app_ctx):
        """Missing arguments give the configured defaults"""
        filters = parse_game_filters({})
        assert filters.limit == 50
        assert filters.offset == 0
        assert filters.applied is False

    def test_limit_is_clamped(self, app_ctx):
        """A limit above the maximum is clamped"""
        assert parse_game_filters({'limit': '5000'}).limit == 100

    @pytest.mark.parametrize('args', [{'limit': '-1'}, {'offset': 'abc'}, {'limit': '2.5'}])
    def test_invalid_paging_is_rejected(self, app_ctx, args):
        """Negative or non-numeric paging values raise a validation error"""
        with pytest.raises(ValidationException):
            parse_game_filters(args)

    def test_offset_above_maximum_is_rejected(self, app_ctx):
        """An all-digit offset beyond the configured maximum is a validation error, not a database error"""
        assert parse_game_filters({'offset': '1000000'}).offset == 1000000
        with pytest.raises(ValidationException, match="'offset' must be at most 1000000"):
            parse_game_filters({'offset': '99999999999999999999'})

    def test_non_ascii_digits_are_rejected(self, app_ctx):
        with pytest.raises(ValidationException):
            parse_game_filters({'offset': '²'})

    def test_text_filters_are_trimmed(self, app_ctx):
        """Text filters are stripped and blank ones dropped"""
        filters = parse_game_filters({'q': '  elden ', 'genre': ' '})
        assert filters.q == 'elden'
        assert filters.genre is None
        assert filters.applied is True
