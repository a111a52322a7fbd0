"""Pydantic schemas for the JSON results API."""

from pydantic import BaseModel

from voting.services.results import Tally, format_percentage


class OptionResult(BaseModel):
    option: str
    count: int
    percentage: str


class ResultsResponse(BaseModel):
    total: int
    results: list[OptionResult]

    @classmethod
    def from_tally(cls, tally: Tally) -> "ResultsResponse":
        return cls(
            total=tally.total,
            results=[
                OptionResult(
                    option=t.option, count=t.count, percentage=format_percentage(t.percentage, 2)
                )
                for t in tally.options
            ],
        )


class ErrorResponse(BaseModel):
    error: str
