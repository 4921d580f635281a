class NotFoundError(LookupError):
    """A referenced user, quiz or quiz response does not exist"""


class DuplicateQuizResponseError(ValueError):
    """The user already submitted a response for this quiz"""

    def __init__(self, user_id: str, quiz_id: str):
        self.user_id = user_id
        self.quiz_id = quiz_id
        super().__init__("Quiz already completed by this user")
