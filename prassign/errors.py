"""Errors raised by the store and the assignment service.

Every error carries a stable ``code`` (the wire error code used by API
layers) and the identifier it refers to.
"""


class PrassignError(Exception):
    """Base for all prassign errors."""

    code = "INTERNAL_ERROR"
    message = "internal error"

    def __init__(self, ident: str | None = None, message: str | None = None) -> None:
        self.ident = ident
        text = message or self.message
        if ident is not None:
            text = f"{text}: {ident}"
        super().__init__(text)


class NotFoundError(PrassignError):
    """Referenced entity does not exist."""

    code = "NOT_FOUND"
    message = "not found"


class TeamNotFoundError(NotFoundError):
    message = "team not found"


class UserNotFoundError(NotFoundError):
    message = "user not found"


class PullRequestNotFoundError(NotFoundError):
    message = "pull request not found"


class AlreadyExistsError(PrassignError):
    """Entity with the same identifier is already stored."""

    code = "ALREADY_EXISTS"
    message = "already exists"


class TeamExistsError(AlreadyExistsError):
    code = "TEAM_EXISTS"
    message = "team already exists"


class PullRequestExistsError(AlreadyExistsError):
    code = "PR_EXISTS"
    message = "pull request already exists"


class InvalidStateError(PrassignError):
    """Operation is not allowed in the entity's current state."""

    code = "INVALID_STATE"
    message = "invalid state"


class PullRequestMergedError(InvalidStateError):
    code = "PR_MERGED"
    message = "pull request already merged"


class ReviewerNotAssignedError(InvalidStateError):
    code = "NOT_ASSIGNED"
    message = "reviewer not assigned to pull request"


class NoCandidateError(PrassignError):
    """No eligible reviewer is left in the team."""

    code = "NO_CANDIDATE"
    message = "no active candidate available"
