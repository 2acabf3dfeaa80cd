"""Assignment service: team roster, pull request lifecycle and reviewers.

Create, merge and reassign run under the store's exclusive section, so
candidate selection and the following write see the same store state.
"""

import logging
import random
from datetime import UTC, datetime
from typing import Callable

from prassign.errors import (
    NoCandidateError,
    PullRequestMergedError,
    ReviewerNotAssignedError,
    TeamNotFoundError,
)
from prassign.models import STATUS_MERGED, STATUS_OPEN, PullRequest, PullRequestShort, Team, User
from prassign.selection import make_rng
from prassign.store import MemoryStore

DEFAULT_REVIEWERS_PER_PR = 2

LOG = logging.getLogger("prassign.service")

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(UTC)


class ReviewService:
    """Operations exposed to API layers.

    Usage:
        service = ReviewService(MemoryStore())
        service.create_team(team)
        pr = service.create_pull_request("pr-1", "Add search", "u1")
        pr, new_reviewer = service.reassign_reviewer("pr-1", pr.assigned_reviewers[0])
    """

    def __init__(
        self,
        store: MemoryStore,
        clock: Clock | None = None,
        rng: random.Random | None = None,
        reviewers_per_pr: int = DEFAULT_REVIEWERS_PER_PR,
    ) -> None:
        self._store = store
        self._clock = clock or utc_now
        self._rng = rng or make_rng()
        self._reviewers_per_pr = reviewers_per_pr

    # Teams and users

    def create_team(self, team: Team) -> Team:
        """Save a team with its users and return the stored copy."""
        with self._store.exclusive():
            self._store.save_team(team)
            return self._store.get_team(team.name)

    def get_team(self, name: str) -> Team:
        return self._store.get_team(name)

    def set_user_active(self, user_id: str, active: bool) -> User:
        return self._store.set_user_active(user_id, active)

    def list_user_reviews(self, user_id: str) -> list[PullRequestShort]:
        """Pull requests the user is assigned to review, ordered by ID."""
        return self._store.list_review_assignments(user_id)

    # Pull requests

    def create_pull_request(self, pr_id: str, name: str, author_id: str) -> PullRequest:
        """Create an OPEN pull request with up to N reviewers from the author's team.

        The author is never picked. If the author's team is gone the pull
        request is created without reviewers.
        """
        pr = PullRequest(id=pr_id, name=name, author_id=author_id)
        with self._store.exclusive():
            author = self._store.get_user(author_id)
            try:
                reviewers = self._store.select_random_active_members(
                    author.team_name,
                    exclude={author_id},
                    limit=self._reviewers_per_pr,
                    rng=self._rng,
                )
            except TeamNotFoundError:
                LOG.debug("PR %s: team %s not found, no reviewers", pr_id, author.team_name)
                reviewers = []

            pr.status = STATUS_OPEN
            pr.assigned_reviewers = [r.id for r in reviewers]
            pr.created_at = self._clock()
            self._store.save_pull_request(pr)
            saved = self._store.get_pull_request(pr_id)
        LOG.info("Created PR %s by %s, reviewers=%s", pr_id, author_id, saved.assigned_reviewers)
        return saved

    def merge_pull_request(self, pr_id: str) -> PullRequest:
        """Mark the pull request MERGED. Merging a merged pull request returns it as is."""
        with self._store.exclusive():
            pr = self._store.get_pull_request(pr_id)
            if pr.is_merged:
                LOG.debug("PR %s already merged", pr_id)
                return pr
            pr.status = STATUS_MERGED
            pr.merged_at = self._clock()
            self._store.update_pull_request(pr)
        LOG.info("Merged PR %s", pr_id)
        return pr

    def reassign_reviewer(self, pr_id: str, old_reviewer_id: str) -> tuple[PullRequest, str]:
        """Replace one reviewer of an open pull request with another team member.

        The replacement comes from the old reviewer's team, is active, and is
        not already assigned. The new reviewer takes the old one's position.

        Returns:
            The updated pull request and the new reviewer's ID.

        Raises:
            PullRequestNotFoundError, PullRequestMergedError,
            ReviewerNotAssignedError, NoCandidateError.
        """
        with self._store.exclusive():
            pr = self._store.get_pull_request(pr_id)
            if pr.is_merged:
                raise PullRequestMergedError(pr_id)
            try:
                position = pr.assigned_reviewers.index(old_reviewer_id)
            except ValueError:
                raise ReviewerNotAssignedError(old_reviewer_id) from None

            old_reviewer = self._store.get_user(old_reviewer_id)
            exclude = {old_reviewer_id, *pr.assigned_reviewers}
            candidates = self._store.select_random_active_members(
                old_reviewer.team_name,
                exclude=exclude,
                limit=1,
                rng=self._rng,
            )
            if not candidates:
                raise NoCandidateError(pr_id)

            new_reviewer_id = candidates[0].id
            pr.assigned_reviewers[position] = new_reviewer_id
            self._store.update_pull_request(pr)
        LOG.info("PR %s: reviewer %s replaced by %s", pr_id, old_reviewer_id, new_reviewer_id)
        return pr, new_reviewer_id
