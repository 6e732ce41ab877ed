import unittest

from pydantic import ValidationError

from hikaru.models import (
    ArchiveGame,
    ArchiveIndex,
    ArchiveMonth,
    GameOutcome,
    GameRecord,
    GameResult,
    Rules,
    TimeClass,
)
from tests.http_fakes import load_fixture_json


def _archive_game(**overrides: object) -> ArchiveGame:
    payload = load_fixture_json("chesscom_archive_hikaru_2024_07.json")["games"][0]
    payload.update(overrides)
    return ArchiveGame.model_validate(payload)


class GameResultTests(unittest.TestCase):
    def test_outcome_mapping(self) -> None:
        cases = [
            (GameResult.WIN, GameOutcome.WIN),
            (GameResult.BUGHOUSE_PARTNER_WIN, GameOutcome.WIN),
            (GameResult.CHECKMATED, GameOutcome.LOSS),
            (GameResult.TIMEOUT, GameOutcome.LOSS),
            (GameResult.RESIGNED, GameOutcome.LOSS),
            (GameResult.ABANDONED, GameOutcome.LOSS),
            (GameResult.KING_OF_THE_HILL, GameOutcome.LOSS),
            (GameResult.THREE_CHECK, GameOutcome.LOSS),
            (GameResult.BUGHOUSE_PARTNER_LOSE, GameOutcome.LOSS),
            (GameResult.STALEMATE, GameOutcome.DRAW),
            (GameResult.AGREED, GameOutcome.DRAW),
            (GameResult.REPETITION, GameOutcome.DRAW),
            (GameResult.INSUFFICIENT, GameOutcome.DRAW),
            (GameResult.FIFTY_MOVE, GameOutcome.DRAW),
            (GameResult.TIME_VS_INSUFFICIENT, GameOutcome.DRAW),
        ]

        for result, expected in cases:
            with self.subTest(result=result):
                self.assertEqual(result.outcome(), expected)

    def test_every_result_has_an_outcome(self) -> None:
        for result in GameResult:
            self.assertIn(result.outcome(), set(GameOutcome))

    def test_fifty_move_wire_value(self) -> None:
        self.assertIs(GameResult("50move"), GameResult.FIFTY_MOVE)

    def test_outcome_scores(self) -> None:
        self.assertEqual(GameOutcome.WIN.score, 1.0)
        self.assertEqual(GameOutcome.DRAW.score, 0.5)
        self.assertEqual(GameOutcome.LOSS.score, 0.0)


class ArchiveModelTests(unittest.TestCase):
    def test_archive_game_reads_aliased_keys(self) -> None:
        game = _archive_game(match="https://api.chess.com/pub/match/1")

        self.assertEqual(game.game_url, "https://www.chess.com/game/live/111111111")
        self.assertEqual(game.team_match, "https://api.chess.com/pub/match/1")
        self.assertEqual(game.white.profile_url, "https://api.chess.com/pub/player/hikaru")
        self.assertEqual(game.time_class, TimeClass.BLITZ)
        self.assertEqual(game.rules, Rules.CHESS)

    def test_optional_fields_default_to_none(self) -> None:
        game = _archive_game()

        self.assertIsNone(game.start_time)
        self.assertIsNone(game.tournament)
        self.assertIsNone(game.team_match)

    def test_missing_player_id_is_rejected(self) -> None:
        payload = load_fixture_json("chesscom_archive_hikaru_2024_07.json")["games"][0]
        del payload["white"]["@id"]

        with self.assertRaises(ValidationError):
            ArchiveGame.model_validate(payload)

    def test_variant_rules_are_parsed(self) -> None:
        for value in ("chess960", "crazyhouse", "threecheck", "kingofthehill", "horde"):
            with self.subTest(rules=value):
                self.assertEqual(_archive_game(rules=value).rules, Rules(value))

    def test_index_and_month_models(self) -> None:
        index = ArchiveIndex.model_validate(load_fixture_json("chesscom_archives_hikaru.json"))
        month = ArchiveMonth.model_validate(
            load_fixture_json("chesscom_archive_hikaru_2024_07.json")
        )

        self.assertEqual(len(index.archives), 2)
        self.assertEqual(len(month.games), 2)


class GameRecordTests(unittest.TestCase):
    def test_from_archive_game_for_black_player(self) -> None:
        record = GameRecord.from_archive_game(_archive_game(), "danielnaroditsky")

        self.assertEqual(record.colour, "Black")
        self.assertEqual(record.rating, 3140)
        self.assertEqual(record.result, GameResult.RESIGNED)
        self.assertEqual(record.result_win_lose, GameOutcome.LOSS)
        self.assertEqual(record.win, 0.0)
        self.assertEqual(record.player_username, "danielnaroditsky")

    def test_from_archive_game_reads_pgn_tags(self) -> None:
        record = GameRecord.from_archive_game(_archive_game(), "Hikaru")

        self.assertEqual(record.eco_pgn, "C50")
        self.assertEqual(record.eco_url, "https://www.chess.com/openings/Italian-Game")
        self.assertEqual(record.date, "2024.07.01")
        self.assertEqual(record.eco_game, "https://www.chess.com/openings/Italian-Game")

    def test_missing_pgn_leaves_tags_empty(self) -> None:
        record = GameRecord.from_archive_game(_archive_game(pgn=None), "Hikaru")

        self.assertIsNone(record.pgn)
        self.assertIsNone(record.eco_pgn)
        self.assertIsNone(record.eco_url)
        self.assertIsNone(record.date)

    def test_record_is_immutable(self) -> None:
        record = GameRecord.from_archive_game(_archive_game(), "Hikaru")

        with self.assertRaises(ValidationError):
            record.rating = 1  # type: ignore[misc]

    def test_record_serializes_enums_as_wire_values(self) -> None:
        record = GameRecord.from_archive_game(_archive_game(), "Hikaru")
        dumped = record.model_dump(mode="json")

        self.assertEqual(dumped["time_class"], "blitz")
        self.assertEqual(dumped["result"], "win")
        self.assertEqual(dumped["result_win_lose"], "win")


if __name__ == "__main__":
    unittest.main()
