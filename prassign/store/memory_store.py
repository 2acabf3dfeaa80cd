"""In-memory store for teams, users and pull requests.

One reader/writer lock guards all maps together with the reviewer index
(user id -> ids of pull requests the user currently reviews). Every pull
request write updates the record and the index inside the same write
section, so the index never disagrees with the records.

Records are validated and detached on the way in and copied on the way out;
callers never hold references into store state.
"""

import logging
import random
from contextlib import contextmanager
from typing import Iterable, Iterator

from prassign.errors import (
    PullRequestExistsError,
    PullRequestNotFoundError,
    TeamExistsError,
    TeamNotFoundError,
    UserNotFoundError,
)
from prassign.models import PullRequest, PullRequestShort, Team, User
from prassign.selection import make_rng, sample_candidates
from prassign.store.rwlock import ReadWriteLock

LOG = logging.getLogger("prassign.store.memory_store")


class MemoryStore:
    """Thread-safe in-memory record store with the reviewer index."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._lock = ReadWriteLock()
        self._rng = rng or make_rng()
        self._teams: dict[str, Team] = {}
        self._users: dict[str, User] = {}
        self._prs: dict[str, PullRequest] = {}
        self._reviews_by_user: dict[str, set[str]] = {}

    @contextmanager
    def exclusive(self) -> Iterator["MemoryStore"]:
        """Hold the write lock across several store calls made by this thread."""
        with self._lock.write_locked():
            yield self

    # Teams and users

    def save_team(self, team: Team) -> None:
        """Insert a team and create one user per member.

        Raises TeamExistsError if the name is taken. A user ID listed twice
        keeps its first entry; a user ID already owned by another team is
        moved to this one.
        """
        stored = Team.model_validate(team.model_dump())
        with self._lock.write_locked():
            if stored.name in self._teams:
                raise TeamExistsError(stored.name)
            self._teams[stored.name] = stored
            created: set[str] = set()
            for member in stored.members:
                if member.user_id in created:
                    continue
                previous = self._users.get(member.user_id)
                if previous is not None:
                    LOG.warning(
                        "User %s moved from team %s to %s",
                        member.user_id,
                        previous.team_name,
                        stored.name,
                    )
                self._users[member.user_id] = User(
                    id=member.user_id,
                    username=member.username,
                    team_name=stored.name,
                    is_active=member.is_active,
                )
                created.add(member.user_id)
        LOG.info("Saved team %s with %s member(s)", stored.name, len(created))

    def get_team(self, name: str) -> Team:
        """Return a copy of the team. Raises TeamNotFoundError."""
        with self._lock.read_locked():
            team = self._teams.get(name)
            if team is None:
                raise TeamNotFoundError(name)
            return team.model_copy(deep=True)

    def get_user(self, user_id: str) -> User:
        """Return a copy of the user. Raises UserNotFoundError."""
        with self._lock.read_locked():
            user = self._users.get(user_id)
            if user is None:
                raise UserNotFoundError(user_id)
            return user.model_copy()

    def set_user_active(self, user_id: str, active: bool) -> User:
        """Set the live activity flag and return the updated user copy."""
        with self._lock.write_locked():
            user = self._users.get(user_id)
            if user is None:
                raise UserNotFoundError(user_id)
            user.is_active = active
            result = user.model_copy()
        LOG.info("User %s is_active -> %s", user_id, active)
        return result

    # Pull requests

    def save_pull_request(self, pr: PullRequest) -> None:
        """Insert a new pull request and index its reviewers.

        Raises PullRequestExistsError if the ID is taken.
        """
        stored = PullRequest.model_validate(pr.model_dump())
        with self._lock.write_locked():
            if stored.id in self._prs:
                raise PullRequestExistsError(stored.id)
            self._prs[stored.id] = stored
            self._index_add(stored.id, stored.assigned_reviewers)
        LOG.debug("Saved PR %s, reviewers=%s", stored.id, stored.assigned_reviewers)

    def update_pull_request(self, pr: PullRequest) -> None:
        """Replace a stored pull request wholesale and re-index its reviewers.

        Index entries of the previous reviewers are dropped before the
        record is replaced; entries for the new reviewers are added after.
        Raises PullRequestNotFoundError if the ID is unknown.
        """
        stored = PullRequest.model_validate(pr.model_dump())
        with self._lock.write_locked():
            previous = self._prs.get(stored.id)
            if previous is None:
                raise PullRequestNotFoundError(stored.id)
            self._index_remove(stored.id, previous.assigned_reviewers)
            self._prs[stored.id] = stored
            self._index_add(stored.id, stored.assigned_reviewers)
        LOG.debug("Updated PR %s, reviewers=%s", stored.id, stored.assigned_reviewers)

    def get_pull_request(self, pr_id: str) -> PullRequest:
        """Return a copy of the pull request. Raises PullRequestNotFoundError."""
        with self._lock.read_locked():
            pr = self._prs.get(pr_id)
            if pr is None:
                raise PullRequestNotFoundError(pr_id)
            return pr.model_copy(deep=True)

    def list_review_assignments(self, user_id: str) -> list[PullRequestShort]:
        """Return pull requests the user reviews, sorted by pull request ID.

        Raises UserNotFoundError if the user is unknown.
        """
        with self._lock.read_locked():
            if user_id not in self._users:
                raise UserNotFoundError(user_id)
            pr_ids = self._reviews_by_user.get(user_id, set())
            result = [self._prs[pr_id].to_short() for pr_id in pr_ids if pr_id in self._prs]
        result.sort(key=lambda short: short.id)
        return result

    # Selection

    def select_random_active_members(
        self,
        team_name: str,
        exclude: Iterable[str],
        limit: int,
        rng: random.Random | None = None,
    ) -> list[User]:
        """Pick up to ``limit`` active members of a team, uniformly at random.

        A member qualifies when it is not excluded and is active both in the
        team's member entry and in its live user record.
        Raises TeamNotFoundError if the team is unknown.
        """
        skip = set(exclude)
        with self._lock.read_locked():
            team = self._teams.get(team_name)
            if team is None:
                raise TeamNotFoundError(team_name)
            candidates = []
            for member in team.members:
                if member.user_id in skip or not member.is_active:
                    continue
                user = self._users.get(member.user_id)
                if user is not None and user.is_active:
                    candidates.append(user.model_copy())
                    skip.add(member.user_id)
            return sample_candidates(candidates, limit, rng or self._rng)

    # Reviewer index (callers hold the write lock)

    def _index_add(self, pr_id: str, reviewer_ids: Iterable[str]) -> None:
        for reviewer_id in reviewer_ids:
            self._reviews_by_user.setdefault(reviewer_id, set()).add(pr_id)

    def _index_remove(self, pr_id: str, reviewer_ids: Iterable[str]) -> None:
        for reviewer_id in reviewer_ids:
            entry = self._reviews_by_user.get(reviewer_id)
            if entry is None:
                continue
            entry.discard(pr_id)
            if not entry:
                del self._reviews_by_user[reviewer_id]
