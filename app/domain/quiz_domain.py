from typing import Dict, List

from app.models.quiz import Quiz
from app.models.quiz_response import QuizResponse
from app.models.user import User
from app.schemas.quiz import QuizCreate, QuizRead
from app.schemas.quiz_response import QuizResponseCreate, QuizResponseRead
from app.schemas.user import UserPublic, UserRead

SAMPLE_QUIZ_ID = "quiz-1"

SAMPLE_QUESTIONS = [
    {
        "id": "q1",
        "text": "Which programming language is known for its use in web development and has a syntax similar to C++?",
        "options": [
            {"id": "a1", "text": "Python"},
            {"id": "a2", "text": "JavaScript"},
            {"id": "a3", "text": "Java"},
            {"id": "a4", "text": "Ruby"},
        ],
    },
    {
        "id": "q2",
        "text": "What does HTML stand for?",
        "options": [
            {"id": "b1", "text": "Hypertext Markup Language"},
            {"id": "b2", "text": "Home Tool Markup Language"},
            {"id": "b3", "text": "Hyperlinks and Text Markup Language"},
            {"id": "b4", "text": "Hypermedia Transfer Markup Language"},
        ],
    },
    {
        "id": "q3",
        "text": "Which CSS property is used to change the text color?",
        "options": [
            {"id": "c1", "text": "font-color"},
            {"id": "c2", "text": "text-color"},
            {"id": "c3", "text": "color"},
            {"id": "c4", "text": "foreground-color"},
        ],
    },
    {
        "id": "q4",
        "text": "What is the correct way to create a function in JavaScript?",
        "options": [
            {"id": "d1", "text": "function = myFunction() {}"},
            {"id": "d2", "text": "function myFunction() {}"},
            {"id": "d3", "text": "create myFunction() {}"},
            {"id": "d4", "text": "def myFunction() {}"},
        ],
    },
    {
        "id": "q5",
        "text": "Which company developed React?",
        "options": [
            {"id": "e1", "text": "Google"},
            {"id": "e2", "text": "Microsoft"},
            {"id": "e3", "text": "Facebook (Meta)"},
            {"id": "e4", "text": "Twitter"},
        ],
    },
]


class QuizDomain:
    """Domain logic for users, quizzes and quiz responses"""

    @staticmethod
    def sample_quiz() -> QuizCreate:
        """The quiz seeded into every fresh storage"""
        return QuizCreate(
            title="Web Development Basics",
            description="Test your knowledge of web development fundamentals",
            questions=SAMPLE_QUESTIONS,
        )

    @staticmethod
    def count_answered(answers: Dict[str, str]) -> int:
        """Number of distinct question IDs that have an answer"""
        return len(set(answers))

    @staticmethod
    def resolve_score(response: QuizResponseCreate) -> int:
        """
        Score supplied by the client, or one point per answered question.

        Answer keys are not checked against the quiz's questions and the
        selected options are not checked for correctness.
        """
        if response.score is not None:
            return response.score
        return QuizDomain.count_answered(response.answers)

    @staticmethod
    def to_public(user: UserRead) -> UserPublic:
        """Strip fields the client never sees"""
        return UserPublic(
            id=user.id,
            name=user.name,
            school=user.school,
            phone_number=user.phone_number,
        )

    @staticmethod
    def user_to_read(user: User) -> UserRead:
        return UserRead.model_validate(user)

    @staticmethod
    def quiz_to_read(quiz: Quiz) -> QuizRead:
        return QuizRead.model_validate(quiz)

    @staticmethod
    def quiz_to_read_list(quizzes: List[Quiz]) -> List[QuizRead]:
        return [QuizDomain.quiz_to_read(quiz) for quiz in quizzes]

    @staticmethod
    def response_to_read(response: QuizResponse) -> QuizResponseRead:
        return QuizResponseRead.model_validate(response)

    @staticmethod
    def response_to_read_list(responses: List[QuizResponse]) -> List[QuizResponseRead]:
        return [QuizDomain.response_to_read(response) for response in responses]
