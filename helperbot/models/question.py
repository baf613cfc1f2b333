"""LeetCode daily question models."""

from pydantic import BaseModel, ConfigDict, Field


class DailyQuestion(BaseModel):
    """Active daily coding challenge question."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str = Field(default="", description="Problem title")
    title_slug: str = Field(default="", alias="titleSlug", description="URL slug")
    difficulty: str = Field(default="", description="Free-form difficulty label")


class _ActiveDailyChallenge(BaseModel):
    question: DailyQuestion = Field(default_factory=DailyQuestion)


class _DailyChallengeData(BaseModel):
    active_daily_coding_challenge_question: _ActiveDailyChallenge = Field(
        default_factory=_ActiveDailyChallenge, alias="activeDailyCodingChallengeQuestion"
    )


class DailyChallengeResponse(BaseModel):
    """GraphQL response envelope for the daily challenge query."""

    data: _DailyChallengeData = Field(default_factory=_DailyChallengeData)

    @property
    def question(self) -> DailyQuestion:
        return self.data.active_daily_coding_challenge_question.question
