import structlog
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from infracanvas import __version__
from infracanvas.api.schemas import GraphRequest, ValidateRequest, ValidateResponse
from infracanvas.compiler import CompilationResult, build_deploy_payload, build_plan, compile_graph
from infracanvas.db.models import CompilationLog
from infracanvas.db.session import get_db
from infracanvas.errors import GraphValidationError
from infracanvas.validation import ValidationSeverity, validate_services

log = structlog.get_logger(__name__)

router = APIRouter()


def _record(db: Session, request: GraphRequest, result: CompilationResult) -> None:
    """Store one compile attempt. The response never depends on this."""
    entry = CompilationLog(
        provider=request.provider.value,
        region=result.payload.region,
        node_count=len(result.payload.nodes),
        edge_count=len(result.payload.edges),
        payload=result.payload.to_json(),
        valid=not result.errors,
    )
    try:
        db.add(entry)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        log.warning("compilation_log_failed", error=str(exc))


@router.get("/health")
def health():
    return {"status": "ok", "version": __version__}


@router.post("/plan")
def plan(request: GraphRequest):
    return build_plan(request.graph, request.provider).to_dict()


@router.post("/payload")
def payload(request: GraphRequest):
    plan = build_plan(request.graph, request.provider)
    deploy = build_deploy_payload(plan, request.provider, project=request.project, env=request.env)
    return deploy.to_wire()


@router.post("/validate", response_model=ValidateResponse)
def validate(request: ValidateRequest):
    result = validate_services(request.graph.nodes)
    return ValidateResponse(
        valid=result.is_valid,
        errors=result.errors_by_node(),
        warnings=[i.message for i in result.issues if i.severity == ValidationSeverity.WARNING],
    )


@router.post("/compile")
def compile_canvas(request: GraphRequest, db: Session = Depends(get_db)):
    # blocked runs are logged too, with valid=False
    result = compile_graph(
        request.graph,
        request.provider,
        project=request.project,
        env=request.env,
        validate=False,
    )
    _record(db, request, result)

    if result.errors:
        error = GraphValidationError(result.errors)
        log.info("compile_blocked", services=len(result.errors))
        return JSONResponse(
            status_code=422,
            content={"status": "invalid", "message": str(error), "errors": error.errors},
        )

    log.info(
        "compiled",
        provider=request.provider.value,
        nodes=len(result.payload.nodes),
        edges=len(result.payload.edges),
    )
    return {
        "status": "success",
        "plan": result.plan.to_dict(),
        "payload": result.payload.to_wire(),
        "prompt": result.prompt,
    }
