"""Profile data: personal details, education and work history."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class Job:
    """A single work experience."""

    company: str = ""
    title: str = ""
    city: str = ""
    start: date | None = None
    end: date | None = None


@dataclass
class PersonalData:
    """Personal details of a user."""

    name: str = ""
    surname: str = ""
    email: str = ""
    birth_date: date | None = None
    birth_place: str = ""
    residence: str = ""


@dataclass
class Education:
    """A diploma and an ordered list of degrees."""

    diploma: str = ""
    degrees: list[str] = field(default_factory=list)

    def add_degree(self, degree: str) -> None:
        """Append a degree."""
        self.degrees.append(degree)

    def remove_degree(self, degree: str) -> None:
        """Remove the first matching degree; do nothing if it is absent."""
        if degree in self.degrees:
            self.degrees.remove(degree)

    def replace_degree(self, old: str, new: str) -> None:
        """Replace the first degree equal to ``old``; do nothing if absent."""
        if old in self.degrees:
            self.degrees[self.degrees.index(old)] = new


@dataclass
class WorkHistory:
    """An ordered list of jobs."""

    jobs: list[Job] = field(default_factory=list)

    def add_job(self, job: Job) -> None:
        """Append a job."""
        self.jobs.append(job)

    def remove_job(self, job: Job) -> None:
        """Remove the first matching job; do nothing if it is absent."""
        if job in self.jobs:
            self.jobs.remove(job)

    def replace_job(self, old: Job, new: Job) -> None:
        """Replace the first job equal to ``old``; do nothing if absent."""
        if old in self.jobs:
            self.jobs[self.jobs.index(old)] = new


@dataclass
class Profile:
    """Everything a user tells about themselves."""

    personal: PersonalData = field(default_factory=PersonalData)
    education: Education = field(default_factory=Education)
    work: WorkHistory = field(default_factory=WorkHistory)

    def add_degree(self, degree: str) -> None:
        self.education.add_degree(degree)

    def remove_degree(self, degree: str) -> None:
        self.education.remove_degree(degree)

    def replace_degree(self, old: str, new: str) -> None:
        self.education.replace_degree(old, new)

    def add_job(self, job: Job) -> None:
        self.work.add_job(job)

    def remove_job(self, job: Job) -> None:
        self.work.remove_job(job)

    def replace_job(self, old: Job, new: Job) -> None:
        self.work.replace_job(old, new)