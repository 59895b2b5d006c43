class ScoreError(Exception):
    pass


class SetAlreadyOverError(ScoreError):
    pass


class UnknownPlayerError(ScoreError):
    pass
