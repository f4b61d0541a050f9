"""Pydantic request/response schemas for the Show Notes API."""

from __future__ import annotations

from pydantic import BaseModel


class ShowNotesRequest(BaseModel):
    """Request body for the /api/show-notes endpoint."""

    transcript: str


class ShowNotesResponse(BaseModel):
    """Response body for the /api/show-notes endpoints."""

    show_notes: str
