from sitecms.schemas.common import MessageResponse
from sitecms.schemas.auth import AuthStatus, LoginRequest
from sitecms.schemas.event import EventCreate, EventUpdate
from sitecms.schemas.content_block import ContentBlockCreate, ContentBlockUpdate
from sitecms.schemas.static_text import StaticTextResponse, StaticTextUpdate
