"""Models listing endpoint - OpenAI compatible."""

import logging
import time

from ...catalog import INFINIAX_MODELS
from ...types import ModelList

logger = logging.getLogger("infiniax-proxy")


async def list_models() -> ModelList:
    """List available models in OpenAI API format.

    GET /v1/models
    """
    logger.info("Received models list request")
    created = int(time.time())
    return {
        "object": "list",
        "data": [
            {
                "id": model.id,
                "object": "model",
                "created": created,
                "owned_by": model.owned_by,
            }
            for model in INFINIAX_MODELS
        ],
    }
