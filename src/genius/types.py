"""Response models for the Genius API.

Every response arrives wrapped in an envelope::

    {"meta": {"status": 200, "message": ""}, "response": {"artist": {...}}}

``Envelope`` decodes the wrapper. The ``response`` slot is then validated
against the payload model of the endpoint that was called, so each client
method only exposes the field it is guaranteed to receive.

Rich text (``description`` on artists and songs, ``body`` on annotations)
always comes back as a mapping keyed by format, e.g. ``{"html": "<p>..</p>"}``
or ``{"dom": {...}}``. The mapping is kept in ``raw_description`` /
``raw_body``; ``normalize`` fills the flat ``description`` / ``body`` string
for the non-structured formats.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any, Final, Literal, Optional, TypeVar, get_args

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .errors import TextFormatError

TextFormat = Literal["dom", "plain", "html"]
SongSort = Literal["title", "popularity"]

DOM: Final[str] = "dom"
TEXT_FORMATS: Final[tuple[str, ...]] = get_args(TextFormat)
SONG_SORTS: Final[tuple[str, ...]] = get_args(SongSort)


class GeniusModel(BaseModel):
    """Base for all decoded objects.

    ``null`` values are dropped before validation so that fields fall back
    to their empty defaults.
    """

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {k: v for k, v in value.items() if v is not None}
        return value


def _split_text_field(value: Any, name: str) -> Any:
    # Wire key ``name`` holds the structured mapping; move it to ``raw_<name>``.
    # A payload that already carries ``raw_<name>`` came from model_dump().
    raw_name = f"raw_{name}"
    if not isinstance(value, dict) or name not in value or raw_name in value:
        return value
    data = dict(value)
    wire = data.pop(name)
    if isinstance(wire, str):
        data[name] = wire
    elif wire is not None:
        data[raw_name] = wire
    return data


class WithDescription(GeniusModel):
    description: str = Field(default="", exclude=True)
    raw_description: Optional[dict[str, Any]] = Field(default=None, serialization_alias="description")

    @model_validator(mode="before")
    @classmethod
    def _split_description(cls, value: Any) -> Any:
        return _split_text_field(value, "description")


class WithBody(GeniusModel):
    body: str = Field(default="", exclude=True)
    raw_body: Optional[dict[str, Any]] = Field(default=None, serialization_alias="body")

    @model_validator(mode="before")
    @classmethod
    def _split_body(cls, value: Any) -> Any:
        return _split_text_field(value, "body")


def flatten_text(raw: Optional[Mapping[str, Any]], text_format: str) -> str:
    """Return the flat string carried by a structured text mapping.

    For ``dom`` the structured form is authoritative and the result is
    always empty. Otherwise the last value of the mapping wins; the API
    sends exactly one entry, keyed by the requested format.

    Raises:
        TextFormatError: A value in the mapping is not a string.
    """
    if text_format == DOM:
        return ""

    flat = ""
    for key, value in (raw or {}).items():
        if not isinstance(value, str):
            raise TextFormatError(key, value)
        flat = value
    return flat


TextModel = TypeVar("TextModel", bound=GeniusModel)


def normalize(model: TextModel, text_format: str) -> TextModel:
    """Return a copy of ``model`` with its flat text field filled in."""
    updates: dict[str, str] = {}
    if isinstance(model, WithDescription) and model.raw_description is not None:
        updates["description"] = flatten_text(model.raw_description, text_format)
    if isinstance(model, WithBody) and model.raw_body is not None:
        updates["body"] = flatten_text(model.raw_body, text_format)
    if not updates:
        return model
    return model.model_copy(update=updates)


class BoundingBox(GeniusModel):
    width: int = 0
    height: int = 0


class Image(GeniusModel):
    url: str = ""
    bounding_box: BoundingBox = Field(default_factory=BoundingBox)


class Avatar(GeniusModel):
    tiny: Optional[Image] = None
    thumb: Optional[Image] = None
    small: Optional[Image] = None
    medium: Optional[Image] = None


class Identity(GeniusModel):
    id: int = 0
    name: str = ""
    provider: str = ""
    custom_properties: Any = None


class Preferences(GeniusModel):
    mention_notifications: bool = False
    creation_comment_notifications: bool = False
    mentioned_forum_notifications: bool = False
    forum_post_creation_notifications: bool = False
    message_notifications: bool = False
    followed_thread_notifications: bool = False
    editorial_suggestion_notifications: bool = False


class Primary(GeniusModel):
    """IQ earned for an action."""
    multiplier: int = 0
    base: float = 0.0
    applicable: bool = False


class IQAction(GeniusModel):
    primary: Optional[Primary] = None


class IQByAction(GeniusModel):
    accept: Optional[IQAction] = None
    reject: Optional[IQAction] = None
    delete: Optional[IQAction] = None
    edit_metadata: Optional[IQAction] = None


class Interactions(GeniusModel):
    following: bool = False
    cosign: bool = False
    pyong: bool = False
    vote: Optional[str] = None


class Relationships(GeniusModel):
    pinned_role: Optional[str] = None


class UserMetadata(GeniusModel):
    """Permissions and interactions of the authenticated user with an object."""
    permissions: list[str] = Field(default_factory=list)
    excluded_permissions: list[str] = Field(default_factory=list)
    features: list[str] = Field(default_factory=list)
    iq_by_action: Optional[IQByAction] = None
    interactions: Interactions = Field(default_factory=Interactions)
    relationships: Relationships = Field(default_factory=Relationships)


class User(GeniusModel):
    id: int = 0
    api_path: str = ""
    url: str = ""
    login: str = ""
    name: str = ""
    email: str = ""
    iq: int = 0
    iq_for_display: str = ""
    artist: bool = False
    avatar: Optional[Avatar] = None
    photo_url: str = ""
    header_image_url: str = ""
    custom_header_image_url: str = ""
    role_for_display: str = ""
    human_readable_role_for_display: str = ""
    roles_for_display: list[str] = Field(default_factory=list)
    available_identity_providers: list[str] = Field(default_factory=list)
    identities: list[Identity] = Field(default_factory=list)
    preferences: Optional[Preferences] = None
    followed_users_count: int = 0
    followers_count: int = 0
    unread_groups_inbox_count: int = 0
    unread_main_activity_inbox_count: int = 0
    unread_messages_count: int = 0
    unread_newsfeed_inbox_count: int = 0
    current_user_metadata: Optional[UserMetadata] = None


class Author(GeniusModel):
    attribution: float = 0.0
    pinned_role: Optional[str] = None
    user: Optional[User] = None


class Annotation(WithBody):
    id: int = 0
    api_path: str = ""
    url: str = ""
    share_url: str = ""
    state: str = ""
    source: Optional[str] = None
    custom_preview: Optional[str] = None
    comment_count: int = 0
    votes_total: int = 0
    community: bool = False
    has_voters: bool = False
    pinned: bool = False
    verified: bool = False
    authors: list[Author] = Field(default_factory=list)
    cosigned_by: list[Any] = Field(default_factory=list)
    verified_by: Optional[User] = None
    current_user_metadata: Optional[UserMetadata] = None


class ClientTimestamps(GeniusModel):
    updated_by_human_at: Optional[datetime] = None
    lyrics_updated_at: Optional[datetime] = None


class Annotatable(GeniusModel):
    """The object (usually a song) a referent is attached to."""
    id: int = 0
    api_path: str = ""
    context: str = ""
    image_url: str = ""
    link_title: str = ""
    title: str = ""
    type: str = ""
    url: str = ""
    client_timestamps: ClientTimestamps = Field(default_factory=ClientTimestamps)


class TextRange(GeniusModel):
    content: str = ""


class DescriptionAnnotation(GeniusModel):
    """Referent holding the annotations that make up a description."""
    type: str = Field(default="", alias="_type")
    id: int = 0
    api_path: str = ""
    path: str = ""
    url: str = ""
    classification: str = ""
    fragment: str = ""
    is_description: bool = False
    song_id: Optional[int] = None
    annotator_id: int = 0
    annotator_login: str = ""
    verified_annotator_ids: list[int] = Field(default_factory=list)
    range: TextRange = Field(default_factory=TextRange)
    annotatable: Optional[Annotatable] = None
    annotations: list[Annotation] = Field(default_factory=list)


class Artist(WithDescription):
    id: int = 0
    api_path: str = ""
    url: str = ""
    name: str = ""
    alternate_names: list[str] = Field(default_factory=list)
    image_url: str = ""
    header_image_url: str = ""
    facebook_name: str = ""
    instagram_name: str = ""
    twitter_name: str = ""
    followers_count: int = 0
    iq: int = 0
    is_meme_verified: bool = False
    is_verified: bool = False
    description_annotation: Optional[DescriptionAnnotation] = None
    user: Optional[User] = None
    current_user_metadata: Optional[UserMetadata] = None


class Album(GeniusModel):
    id: int = 0
    api_path: str = ""
    url: str = ""
    name: str = ""
    full_title: str = ""
    cover_art_url: str = ""
    artist: Optional[Artist] = None


class Stats(GeniusModel):
    accepted_annotations: int = 0
    contributors: int = 0
    hot: bool = False
    iq_earners: int = 0
    transcribers: int = 0
    unreviewed_annotations: int = 0
    verified_annotations: int = 0
    concurrents: int = 0
    pageviews: int = 0


class FactTrack(GeniusModel):
    provider: str = ""
    external_url: str = ""
    button_text: str = ""
    help_link_text: str = ""
    help_link_url: str = ""


class Media(GeniusModel):
    provider: str = ""
    provider_id: str = ""
    native_uri: str = ""
    start: int = 0
    type: str = ""
    url: str = ""


class Contributor(GeniusModel):
    contributions: list[str] = Field(default_factory=list)
    artist: Optional[Artist] = None
    user: Optional[User] = None


class SongRelationship(GeniusModel):
    type: str = ""
    songs: list[Song] = Field(default_factory=list)


class Song(WithDescription):
    id: int = 0
    api_path: str = ""
    url: str = ""
    path: str = ""
    title: str = ""
    title_with_featured: str = ""
    full_title: str = ""
    release_date: str = ""
    recording_location: str = ""
    annotation_count: int = 0
    pyongs_count: int = 0
    lyrics_owner_id: int = 0
    lyrics_state: str = ""
    embed_content: str = ""
    featured_video: bool = False
    header_image_url: str = ""
    header_image_thumbnail_url: str = ""
    song_art_image_url: str = ""
    song_art_image_thumbnail_url: str = ""
    stats: Optional[Stats] = None
    album: Optional[Album] = None
    fact_track: Optional[FactTrack] = None
    primary_artist: Optional[Artist] = None
    featured_artists: list[Artist] = Field(default_factory=list)
    producer_artists: list[Artist] = Field(default_factory=list)
    writer_artists: list[Artist] = Field(default_factory=list)
    custom_performances: list[Any] = Field(default_factory=list)
    description_annotation: Optional[DescriptionAnnotation] = None
    media: list[Media] = Field(default_factory=list)
    song_relationships: list[SongRelationship] = Field(default_factory=list)
    verified_annotations_by: list[User] = Field(default_factory=list)
    verified_contributors: list[Contributor] = Field(default_factory=list)
    verified_lyrics_by: list[User] = Field(default_factory=list)
    current_user_metadata: Optional[UserMetadata] = None


SongRelationship.model_rebuild()


class Hit(GeniusModel):
    """A search result. The API only returns song hits."""
    highlights: list[Any] = Field(default_factory=list)
    index: str = ""
    type: str = ""
    result: Optional[Song] = None


class WebPage(GeniusModel):
    id: int = 0
    api_path: str = ""
    domain: str = ""
    normalized_url: str = ""
    share_url: str = ""
    title: str = ""
    url: str = ""
    annotation_count: int = 0


class Meta(GeniusModel):
    """Embedded status. A missing or null status decodes as 0."""
    status: int = 0
    message: str = ""


class Envelope(GeniusModel):
    """Top-level wrapper of every response body."""
    meta: Meta = Field(default_factory=Meta)
    response: dict[str, Any] = Field(default_factory=dict)


class AccountPayload(GeniusModel):
    user: User


class ArtistPayload(GeniusModel):
    artist: Artist


class ArtistSongsPayload(GeniusModel):
    """One page of an artist's songs; ``next_page`` is None on the last page."""
    songs: list[Song] = Field(default_factory=list)
    next_page: Optional[int] = None


class SongPayload(GeniusModel):
    song: Song


class AnnotationPayload(GeniusModel):
    annotation: Annotation


class SearchPayload(GeniusModel):
    hits: list[Hit] = Field(default_factory=list)


class WebPagePayload(GeniusModel):
    """Shape of the ``web_page`` slot of the envelope.

    No client operation requests web pages; the model documents the slot and
    lets callers decode it from a raw envelope.
    """
    web_page: WebPage
