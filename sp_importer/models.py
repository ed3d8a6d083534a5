from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class Entry(BaseModel):
    model_config = ConfigDict(frozen=True)

    original: str  # normalized, used as the lookup key
    translation: str  # line breaks kept as the two-character "\n" marker
    source_file: str


class ImportResult(BaseModel):
    path: str
    matched: int = 0
    modified: bool = False
    pinned_source: Optional[str] = None
    encoding: Optional[str] = None  # encoding the rewritten file was written in
    content: Optional[str] = Field(default=None, exclude=True)

    def report_line(self) -> str:
        return f"Matched {self.matched} strings in {self.path}"


class BatchReport(BaseModel):
    entries_indexed: int = 0
    results: List[ImportResult] = Field(default_factory=list)

    @property
    def modified(self) -> List[ImportResult]:
        return [r for r in self.results if r.modified]

    def render(self) -> str:
        return "".join(r.report_line() + "\n" for r in self.modified)


class ImportedCsv(BaseModel):
    sha256: str
    encoding: str = Field(default="utf-8")
    content_b64: str


class ImportSummary(BaseModel):
    matched: int = 0
    modified: bool = False
    pinned_source: Optional[str] = Field(default=None, examples=["chapter01.txt"])


class ImportResponse(BaseModel):
    imported_csv: ImportedCsv
    report: ImportSummary


class HealthResponse(BaseModel):
    ok: bool = True
