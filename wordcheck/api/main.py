from __future__ import annotations

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, Field

from wordcheck.analysis.tokenizer import analyze
from wordcheck.common.config import settings
from wordcheck.replace import FileDictionaryProvider, LoadError, Match, SimpleReplaceRule, Token

app = FastAPI(title="Wrong Word API")


class TokenModel(BaseModel):
    text: str = Field(..., min_length=1)
    start: int = Field(..., ge=0)
    lemmas: list[str | None] = Field(default_factory=list)
    immunized: bool = False
    ignored_by_speller: bool = False
    tagged: bool = False

    def to_token(self) -> Token:
        return Token(
            text=self.text,
            start=self.start,
            lemmas=tuple(self.lemmas),
            immunized=self.immunized,
            ignored_by_speller=self.ignored_by_speller,
            tagged=self.tagged,
        )


class TokensRequest(BaseModel):
    tokens: list[TokenModel]


class MatchModel(BaseModel):
    start: int
    end: int
    message: str
    short_message: str
    suggestions: list[str]


class CheckResponse(BaseModel):
    matches: list[MatchModel]
    count: int


class CheckService:
    def __init__(self, *, rule: SimpleReplaceRule | None = None) -> None:
        self.rule = rule or SimpleReplaceRule(
            FileDictionaryProvider(settings.dictionary_path),
            settings.rule_config(),
        )

    def _response(self, matches: list[Match]) -> CheckResponse:
        return CheckResponse(
            matches=[
                MatchModel(
                    start=m.start,
                    end=m.end,
                    message=m.message,
                    short_message=m.short_message,
                    suggestions=list(m.suggestions),
                )
                for m in matches
            ],
            count=len(matches),
        )

    def check_tokens(self, tokens: list[Token]) -> CheckResponse:
        return self._response(self.rule.match(tokens))

    def check_text(self, text: str) -> CheckResponse:
        return self.check_tokens(analyze(text))


check_service = CheckService()


@app.get("/check", response_model=CheckResponse)
def check(q: str = Query(..., min_length=1)) -> CheckResponse:
    try:
        return check_service.check_text(q)
    except LoadError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc


@app.post("/check/tokens", response_model=CheckResponse)
def check_tokens(request: TokensRequest) -> CheckResponse:
    try:
        return check_service.check_tokens([token.to_token() for token in request.tokens])
    except LoadError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
