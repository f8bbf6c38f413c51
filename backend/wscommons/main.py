from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from wscommons.core.config import get_settings
from wscommons.core.oauth_auth import KeyValuePair
from wscommons.core.oauth_nonce import RandomSourceError
from wscommons.core.oauth_signer import OAuthSigner
from wscommons.core.tracing import LogConfig, configure_logger
from wscommons.models.oauth import LogPackage, SignRequest, SignResponse

app = FastAPI(title="web-service-commons API")

settings = get_settings()
logger = configure_logger(settings.log_config())

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.post("/api/oauth/sign", response_model=SignResponse)
async def oauth_sign(req: SignRequest):
    if not req.consumer_key:
        raise HTTPException(status_code=400, detail="consumer_key required")
    signer = OAuthSigner(
        consumer_key=req.consumer_key,
        consumer_secret=req.consumer_secret,
        token=req.token,
        token_secret=req.token_secret,
    )
    try:
        signed = signer.sign(
            req.method,
            req.url,
            [KeyValuePair(p.key, p.value) for p in req.params],
            nonce=req.nonce,
            timestamp=req.timestamp,
        )
    except RandomSourceError as e:
        logger.error("nonce generation failed: %s", e)
        raise HTTPException(status_code=503, detail="secure random source unavailable")
    return SignResponse(
        header=signed.header,
        signature=signed.signature,
        signature_base=signed.signature_base,
        nonce=signed.nonce,
        timestamp=signed.timestamp,
    )


@app.post("/api/log")
async def reassign_log(pkg: LogPackage):
    if pkg.path and pkg.path != settings.log_path:
        raise HTTPException(status_code=400, detail="log path is fixed by WSC_LOG_PATH")
    config = LogConfig(sink=pkg.sink, level=pkg.level, path=settings.log_path)
    try:
        configure_logger(config)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except OSError as e:
        logger.warning("failed to open log file %s: %s", config.path, e)
        raise HTTPException(status_code=503, detail=f"log file unavailable: {e}")
    logger.info("log reassigned sink=%s level=%s", config.sink, config.level)
    return {"sink": config.sink.lower(), "level": config.level.lower()}


if __name__ == "__main__":
    uvicorn.run("wscommons.main:app", host=settings.host, port=settings.port, reload=True)
