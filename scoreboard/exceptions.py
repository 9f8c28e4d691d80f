class ScoreboardError(Exception):
    pass


class InvalidArgumentError(ScoreboardError, ValueError):
    pass


class DuplicateTeamNamesError(ScoreboardError):
    pass


class MatchAlreadyExistsError(ScoreboardError):
    pass


class TeamAlreadyInMatchError(ScoreboardError):
    pass


class MatchNotFoundError(ScoreboardError):
    pass
