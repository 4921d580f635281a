#!/usr/bin/env python3
"""
Pytest tests for the quiz retrieval endpoints
Every test runs once per storage variant.
"""

from tests.helpers import (
    ApiTestCase,
    is_utc_timestamp,
    make_database_storage,
    make_memory_storage,
)


class QuizEndpointsContract(ApiTestCase):
    def test_get_seeded_quiz(self):
        """Test the seeded quiz JSON shape"""
        response = self.client.get("/api/quizzes/quiz-1")

        assert response.status_code == 200
        quiz = response.json()
        assert set(quiz) == {"id", "title", "description", "questions", "createdAt"}
        assert quiz["id"] == "quiz-1"
        assert quiz["title"] == "Web Development Basics"
        assert is_utc_timestamp(quiz["createdAt"])
        assert [q["id"] for q in quiz["questions"]] == ["q1", "q2", "q3", "q4", "q5"]
        for question in quiz["questions"]:
            assert set(question) == {"id", "text", "options"}
            option_ids = [option["id"] for option in question["options"]]
            assert len(option_ids) == 4
            assert len(set(option_ids)) == 4

    def test_list_quizzes(self):
        """Test that the seeded quiz is the only listed quiz"""
        response = self.client.get("/api/quizzes")

        assert response.status_code == 200
        assert [quiz["id"] for quiz in response.json()] == ["quiz-1"]

    def test_list_quizzes_empty(self):
        """Test listing with nothing seeded"""
        self.use_storage(self.make_storage(seed=False))

        response = self.client.get("/api/quizzes")

        assert response.status_code == 200
        assert response.json() == []

    def test_get_unknown_quiz(self):
        """Test that an unknown quiz is a 404"""
        response = self.client.get("/api/quizzes/quiz-404")

        assert response.status_code == 404
        assert response.json() == {"error": "Quiz not found"}


class TestQuizEndpointsMemory(QuizEndpointsContract):
    def make_storage(self, seed: bool = True):
        return make_memory_storage(seed)


class TestQuizEndpointsDatabase(QuizEndpointsContract):
    def make_storage(self, seed: bool = True):
        return make_database_storage(seed)
