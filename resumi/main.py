import argparse
import json
import mimetypes
import sys
from pathlib import Path

from resumi.analysis.models import AnalysisMetadata, AnalysisRequest
from resumi.analysis.service import AnalysisService, build_analysis_service
from resumi.config.settings import Settings
from resumi.database.connection import close_pool, init_pool
from resumi.database.repositories.analysis_repository import AnalysisRepository
from resumi.exceptions import ResumiError, error_payload
from resumi.extraction.extractor import build_extractor
from resumi.extraction.models import ExtractionResult
from resumi.extraction.receiver import UploadReceiver
from resumi.logging.logger import Log


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="resumi", description="AI resume review")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("init-db", help="create the resume_analyses table")

    extract = commands.add_parser("extract", help="extract text from a resume file")
    extract.add_argument("file", type=Path)

    analyze = commands.add_parser("analyze", help="extract, review and store a resume")
    analyze.add_argument("file", type=Path)

    show = commands.add_parser("show", help="print a stored analysis")
    show.add_argument("unique_id")
    return parser


def extract_file(path: Path, settings: Settings) -> ExtractionResult:
    """Run a file on disk through the upload boundary and the extractor."""
    mime_type, _ = mimetypes.guess_type(path.name)
    receiver = UploadReceiver(Path(settings.upload_dir), settings.max_file_size_bytes)
    upload = receiver.receive(path.name, mime_type or "", path.read_bytes())
    return build_extractor(settings).extract(upload)


def run(args: argparse.Namespace, settings: Settings) -> dict[str, object]:
    if args.command == "extract":
        result = extract_file(args.file, settings)
        return {
            "success": True,
            "message": "Resume processed successfully",
            "data": result.to_dict(),
        }

    repository = AnalysisRepository()
    if args.command == "init-db":
        repository.ensure_schema()
        return {"success": True, "message": "Schema ready"}

    if args.command == "show":
        shared = AnalysisService(steps=[], repository=repository).get_shared(args.unique_id)
        return {"success": True, "data": shared.to_dict()}

    service = build_analysis_service(settings, repository)
    result = extract_file(args.file, settings)
    request = AnalysisRequest(
        resume_text=result.text,
        metadata=AnalysisMetadata(
            filename=result.filename,
            file_size=result.file_size,
            processing_method=result.processing_method.value,
        ),
    )
    return service.analyze(request).to_dict()


def main(argv: list[str] | None = None) -> int:
    """Entry point: parse args -> configure logging -> run one command."""
    args = build_parser().parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    needs_db = args.command != "extract"
    if needs_db:
        init_pool(settings)
    try:
        payload = run(args, settings)
    except ResumiError as exc:
        Log.error(f"{args.command} failed: {type(exc).__name__}: {exc}")
        print(json.dumps(error_payload(exc, settings), indent=2))
        return 1
    finally:
        if needs_db:
            close_pool()

    print(json.dumps(payload, indent=2, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(main())
