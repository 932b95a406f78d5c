"""
Web app - Load, launch and edit launch plans over HTTP.

Routes:
  GET  /              current plan text (share link, cookie, or sample)
  GET  /api/resolve   every destination for ?q= against the cookie plan
  POST /launch        303 redirect to the first destination for a query
  POST /edit          validate, save, share or add to the cookie plan

The plan is client-held: it arrives compressed in the "p" query parameter,
the plan cookie, or the form body, and is parsed again on every request.

Run with:
  uvicorn launchplan.web:app
"""

from typing import Any, Dict, Optional

from fastapi import FastAPI, Form, Request
from fastapi.responses import JSONResponse, RedirectResponse
from loguru import logger

from .errors import PlanParseError
from .search.models import Plan
from .search.resolver import resolve
from .services.plan_parser import parse_engines_json, parse_plan
from .services.plan_store import (
    compress,
    decompress,
    load_plan_text,
    merge_plans,
    share_link,
)
from .utils.helpers import configure_logging, load_settings

SECONDS_PER_DAY = 24 * 60 * 60


def create_app(settings: Optional[Dict[str, Any]] = None) -> FastAPI:
    settings = settings or load_settings()
    configure_logging(settings["logging"]["level"])
    cookie_name = settings["cookie"]["name"]
    cookie_max_age = int(settings["cookie"]["max_age_days"]) * SECONDS_PER_DAY
    share_param = settings["share"]["param"]

    app = FastAPI(title="Launchplan", version="0.1.0")

    def current_plan_text(request: Request) -> str:
        return load_plan_text(
            share_token=request.query_params.get(share_param),
            cookie_token=request.cookies.get(cookie_name),
        )

    @app.get("/")
    def load(request: Request) -> Dict[str, Any]:
        return {"planToml": current_plan_text(request)}

    @app.get("/api/resolve")
    def resolve_all(request: Request, q: str = "") -> JSONResponse:
        try:
            plan = parse_plan(current_plan_text(request))
        except PlanParseError as e:
            return JSONResponse({"query": q, "errorMessage": str(e)}, status_code=422)
        destinations = resolve(plan, q)
        return JSONResponse({"query": q, "destinations": [d.to_dict() for d in destinations]})

    @app.post("/launch")
    def launch(
        request: Request,
        query: str = Form(""),
        lz_engines: str = Form("", alias="lz-engines"),
        plan_toml: str = Form("", alias="planToml"),
    ):
        try:
            if lz_engines:
                plan = parse_engines_json(decompress(lz_engines))
            elif plan_toml:
                plan = parse_plan(plan_toml)
            else:
                plan = parse_plan(current_plan_text(request))
        except PlanParseError as e:
            logger.warning(f"Launch with unreadable plan: {e}")
            plan = Plan()

        destinations = resolve(plan, query)
        if not destinations:
            return JSONResponse({"query": query})

        logger.debug(f"Redirecting {query!r} to {destinations[0].url}")
        return RedirectResponse(destinations[0].url, status_code=303)

    @app.post("/edit")
    def edit(
        request: Request,
        operation: str = Form(""),
        plan_toml: str = Form("", alias="planToml"),
    ):
        token = compress(plan_toml)
        logger.debug(f"Edit operation={operation!r} plan={len(plan_toml)} chars, token={len(token)} chars")

        try:
            parse_plan(plan_toml)
        except PlanParseError as e:
            return JSONResponse({"errorMessage": str(e), "planToml": plan_toml})

        if operation == "save":
            response = JSONResponse({
                "successMessage": "Plan successfully saved to browser cookie.",
                "fromEditOperation": True,
            })
            response.set_cookie(
                cookie_name,
                token,
                path="/",
                httponly=False,
                max_age=cookie_max_age,
            )
            return response

        if operation == "share":
            origin = str(request.base_url)
            link = share_link(origin, plan_toml, param=share_param)
            return JSONResponse({
                "successMessage": "Share this launch plan with the link.",
                "shareLink": link,
                "planToml": plan_toml,
            })

        if operation == "add":
            saved = decompress(request.cookies.get(cookie_name))
            return JSONResponse({
                "successMessage": "Added to browser cookie plan. (Not saved, yet.)",
                "planToml": merge_plans(saved, plan_toml),
            })

        return JSONResponse({"successMessage": "", "fromEditOperation": True})

    return app


app = create_app()
