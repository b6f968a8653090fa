"""Concurrent access through the single locked connection."""

from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

import db_stores
from database import to_timestamp
from scheduler import RepetitionState, schedule


class TestConcurrentReviews:
    def test_reviews_of_same_card_serialize(self, vocab_store, spanish, monkeypatch):
        vocab = vocab_store.create_vocabulary(spanish.id, "río", "river")
        card = vocab_store.get_flashcard_for_vocabulary(vocab.id)

        seen_repetitions = []
        first_inside = threading.Event()
        original = db_stores.schedule

        def slow_schedule(state, quality, now):
            seen_repetitions.append(state.repetitions)
            if len(seen_repetitions) == 1:
                first_inside.set()
                time.sleep(0.2)
            return original(state, quality, now)

        monkeypatch.setattr(db_stores, "schedule", slow_schedule)

        first = threading.Thread(target=vocab_store.review_flashcard, args=(card.id, 5))
        first.start()
        assert first_inside.wait(timeout=5)
        second = threading.Thread(target=vocab_store.review_flashcard, args=(card.id, 5))
        second.start()
        first.join(timeout=5)
        second.join(timeout=5)

        # The second review must start from the state the first one wrote
        assert seen_repetitions == [0, 1]
        assert vocab_store.get_flashcard(card.id).repetitions == 2

    def test_many_reviewers(self, vocab_store, spanish):
        vocab = vocab_store.create_vocabulary(spanish.id, "mar", "sea")
        card = vocab_store.get_flashcard_for_vocabulary(vocab.id)

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(lambda _: vocab_store.review_flashcard(card.id, 4), range(16)))

        assert vocab_store.get_flashcard(card.id).repetitions == 16

    def test_reviews_of_different_cards_stay_separate(self, vocab_store, spanish, clock):
        easy = vocab_store.get_flashcard_for_vocabulary(vocab_store.create_vocabulary(spanish.id, "sol", "sun").id)
        hard = vocab_store.get_flashcard_for_vocabulary(vocab_store.create_vocabulary(spanish.id, "ajo", "garlic").id)

        with ThreadPoolExecutor(max_workers=4) as pool:
            futures = []
            for _ in range(4):
                futures.append(pool.submit(vocab_store.review_flashcard, easy.id, 5))
                futures.append(pool.submit(vocab_store.review_flashcard, hard.id, 1))
            for future in futures:
                future.result(timeout=5)

        for card, quality in ((easy, 5), (hard, 1)):
            expected = RepetitionState()
            for _ in range(4):
                outcome = schedule(expected, quality, clock())
                expected = RepetitionState(outcome.ease_factor, outcome.interval_days, outcome.repetitions)
            stored = vocab_store.get_flashcard(card.id)
            assert stored.repetitions == expected.repetitions
            assert stored.interval_days == expected.interval_days
            assert stored.ease_factor == pytest.approx(expected.ease_factor)
            assert stored.next_review == to_timestamp(outcome.next_review)

        assert vocab_store.get_flashcard(easy.id).repetitions == 4
        assert vocab_store.get_flashcard(hard.id).repetitions == 0


class TestConcurrentWrites:
    def test_parallel_vocabulary_creation(self, vocab_store, spanish, database):
        def create(i):
            return vocab_store.create_vocabulary(spanish.id, f"palabra{i}", f"word{i}")

        with ThreadPoolExecutor(max_workers=8) as pool:
            created = list(pool.map(create, range(40)))

        assert len({v.id for v in created}) == 40
        with database.session() as conn:
            assert conn.execute("SELECT COUNT(*) FROM vocabulary").fetchone()[0] == 40
            assert conn.execute("SELECT COUNT(*) FROM flashcards").fetchone()[0] == 40

    def test_readers_and_writers(self, vocab_store, spanish):
        errors = []

        def write(i):
            vocab_store.create_vocabulary(spanish.id, f"w{i}", "x")

        def read(_):
            try:
                vocab_store.get_vocabulary_by_language(spanish.id)
                vocab_store.get_due_flashcards()
            except Exception as e:
                errors.append(e)

        with ThreadPoolExecutor(max_workers=8) as pool:
            for i in range(20):
                pool.submit(write, i)
                pool.submit(read, i)

        assert errors == []
        assert len(vocab_store.get_vocabulary_by_language(spanish.id)) == 20
