"""Main module entrypoint for local runtime execution.

This module validates startup configuration and either launches the FastAPI
service or enqueues one job from a JSON request file.
"""

import argparse
from pathlib import Path

import uvicorn

from job_creator.api import ResetJobRequestBody, SyncJobRequestBody
from job_creator.bootstrap import bootstrap_create_application, bootstrap_create_job_creator
from job_creator.config import config_load_settings


def main() -> None:
    """Run selected runtime command with validated startup configuration.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
        SystemExit: Raised with status 1 when a job was not enqueued.
    """

    argument_parser = argparse.ArgumentParser(description="Connection job creator runtime entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="api",
        choices=("api", "enqueue-sync", "enqueue-reset"),
        help="Runtime command: `api` starts server, `enqueue-sync` and `enqueue-reset` "
        "enqueue one job described by --request",
        type=str,
    )
    argument_parser.add_argument(
        "--request",
        dest="request_path",
        type=Path,
        help="JSON request file for `enqueue-sync` or `enqueue-reset`",
    )
    parsed_arguments = argument_parser.parse_args()

    settings = config_load_settings()

    if parsed_arguments.command in {"enqueue-sync", "enqueue-reset"}:
        if parsed_arguments.request_path is None:
            argument_parser.error(f"--request is required for `{parsed_arguments.command}`")
        request_json = parsed_arguments.request_path.read_text(encoding="utf-8")
        job_creator = bootstrap_create_job_creator(settings)
        if parsed_arguments.command == "enqueue-sync":
            job_id = job_creator.job_create_sync(SyncJobRequestBody.model_validate_json(request_json).api_to_domain())
        else:
            job_id = job_creator.job_create_reset_connection(
                ResetJobRequestBody.model_validate_json(request_json).api_to_domain()
            )
        if job_id is None:
            print("JOB_NOT_ENQUEUED")
            raise SystemExit(1)
        print(f"JOB_ENQUEUED: {job_id}")
        return

    application = bootstrap_create_application(settings)
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.application_port,
    )


if __name__ == "__main__":
    main()
