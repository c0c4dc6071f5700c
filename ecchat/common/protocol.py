"""
Wire message definitions using Pydantic.

Messages are JSON objects handed to the relay, which forwards them verbatim.
A ciphertext travels as an ordered array of [C1, C2] pairs, each point as
{"x": ..., "y": ...}.
"""

import json
from typing import List, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ecchat.common.exceptions import ProtocolError
from ecchat.crypto.curve import CurvePoint, Identity, Point


class PointModel(BaseModel):
    """Affine curve point."""
    x: int = Field(..., ge=0, description="x coordinate in [0, p)")
    y: int = Field(..., ge=0, description="y coordinate in [0, p)")


class PublicKeyMessage(BaseModel):
    """Session public key, exchanged before any chat message."""
    model_config = ConfigDict(populate_by_name=True)

    type: Literal["public_key"] = "public_key"
    sender: str = Field(..., alias="from", description="Sender identifier")
    x: int = Field(..., ge=0)
    y: int = Field(..., ge=0)


class MessagePayload(BaseModel):
    """Encrypted chat message: one [C1, C2] pair per character."""
    model_config = ConfigDict(populate_by_name=True)

    type: Literal["message"] = "message"
    content: List[Tuple[PointModel, PointModel]] = Field(..., description="Ordered ciphertext pairs")
    sender: str = Field(..., alias="from", description="Sender identifier")
    ts: int = Field(..., description="Unix timestamp in milliseconds")


class MessageFailMessage(BaseModel):
    """Sent back when a message could not be delivered or processed."""
    type: Literal["message_fail"] = "message_fail"
    error: str = Field(..., description="Human-readable error message")


WireMessage = Union[PublicKeyMessage, MessagePayload, MessageFailMessage]

MESSAGE_TYPES = {
    "public_key": PublicKeyMessage,
    "message": MessagePayload,
    "message_fail": MessageFailMessage,
}


def point_to_model(point: CurvePoint) -> PointModel:
    if isinstance(point, Identity):
        raise ProtocolError("Point at infinity has no wire representation")
    return PointModel(x=point.x, y=point.y)


def model_to_point(model: PointModel) -> Point:
    return Point(model.x, model.y)


def ciphertext_to_wire(ciphertext) -> List[Tuple[PointModel, PointModel]]:
    """Convert [(C1, C2), ...] into wire models, keeping order."""
    return [(point_to_model(c1), point_to_model(c2)) for c1, c2 in ciphertext]


def ciphertext_from_wire(content: List[Tuple[PointModel, PointModel]]) -> List[Tuple[Point, Point]]:
    """Convert wire pairs back into [(C1, C2), ...], keeping order."""
    return [(model_to_point(c1), model_to_point(c2)) for c1, c2 in content]


def serialize_message(msg: BaseModel) -> str:
    """Serialize Pydantic message to JSON string."""
    return msg.model_dump_json(by_alias=True)


def deserialize_message(json_str: str) -> WireMessage:
    """
    Parse a JSON string into the matching wire model.

    Raises:
        ProtocolError: If the JSON is malformed, the type is unknown, or
            the payload does not match its schema
    """
    try:
        data = json.loads(json_str)
    except (TypeError, ValueError) as e:
        raise ProtocolError(f"Invalid JSON: {e}")

    if not isinstance(data, dict):
        raise ProtocolError("Message must be a JSON object")

    msg_type = data.get("type")
    model = MESSAGE_TYPES.get(msg_type) if isinstance(msg_type, str) else None
    if model is None:
        raise ProtocolError(f"Unknown message type: {msg_type!r}")

    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise ProtocolError(f"Invalid {data['type']} message: {e}")
