import logging
from dataclasses import asdict

from fastapi import APIRouter, HTTPException

from blockrender.api.serializers import node_from_dict
from blockrender.compiler import render
from blockrender.interactions.dispatcher import InteractionDispatcher
from blockrender.interactions.registry import get_interaction_registry
from blockrender.ir.errors import DuplicateActionError, ShapeError
from blockrender.schemas import InteractionRequest, RenderRequest, RenderResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _shape_error(e: ShapeError) -> HTTPException:
    return HTTPException(
        status_code=422,
        detail={
            "message": str(e),
            "kind": e.kind,
            "issues": [asdict(issue) for issue in e.issues],
        },
    )


@router.get("/health")
def health():
    return {"status": "ok"}


@router.post("/render", response_model=RenderResponse)
async def render_tree(request: RenderRequest):
    try:
        root = node_from_dict(request.tree)
        result = await render(root)
    except DuplicateActionError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except ShapeError as e:
        raise _shape_error(e)

    return RenderResponse(document=result.document, actions=result.action_ids)


@router.post("/interactions")
async def handle_interaction(request: InteractionRequest):
    dispatcher = InteractionDispatcher(get_interaction_registry())

    try:
        return await dispatcher.handle(request.payload)
    except ShapeError as e:
        # options returned by a search callback did not render
        raise _shape_error(e)
    except ValueError as e:
        logger.warning("rejected interaction payload: %s", e)
        raise HTTPException(status_code=400, detail=str(e))
