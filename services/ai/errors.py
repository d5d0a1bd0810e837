class EmptyResponseError(RuntimeError):
    """OpenAI 가 내용 없는 응답을 돌려준 경우"""

    def __init__(self, message: str = "Empty response from OpenAI"):
        super().__init__(message)
