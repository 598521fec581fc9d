"""Error conditions raised while computing repository statistics"""


class RepoStatsError(Exception):
    """Base error for a failed statistics fetch"""

    pass


class MissingInput(RepoStatsError):
    """Username or repository name was not provided"""

    def __init__(self, message: str = "Please enter both username and repository name"):
        super().__init__(message)


class FetchFailed(RepoStatsError):
    """GitHub API call returned a non-success status or could not be made"""

    pass


class EmptyAggregation(RepoStatsError):
    """No bytes left to aggregate after filtering"""

    def __init__(self, message: str = "No data to display"):
        super().__init__(message)
