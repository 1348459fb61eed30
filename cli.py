import argparse
import json
import logging
import os
import uuid as _uuid

from config.settings import get_settings
from db import schema
from db.connection import get_connection
from db.repos.councillors_repo import CouncillorsRepo
from google_searcher import GoogleSearcher
from pipelines.runner import Pipeline, RunContext
from pipelines.steps import LoadCouncillors, PersistResults, ReconcileSources, ResolveEmails
from services.page_fetcher import PageFetcher
from services.reporting import print_summary, run_summary
from services.resolver import EmailResolver
from sources.registry import build_dataset_sources
from utils.logging_setup import init_logging


def _open_repo(args):
	settings = get_settings()
	conn = get_connection(args.db)
	schema.bootstrap(conn, settings.table_name)
	return conn, CouncillorsRepo(conn, settings.table_name)


def _close(conn):
	logging.info("Writing database to disk.")
	conn.close()


def cmd_bootstrap(args):
	conn, _repo = _open_repo(args)
	_close(conn)
	print("Schema ready")


def _build_pipeline(repo, settings, max_searches, force_reconcile=False):
	collaborators = {}

	# Search credentials are only needed once a row actually needs a search
	def _resolver():
		if "resolver" not in collaborators:
			collaborators["google"] = GoogleSearcher(settings)
			collaborators["resolver"] = EmailResolver(
				collaborators["google"], PageFetcher(settings), max_results=settings.max_search_results
			)
		return collaborators["resolver"]

	steps = [LoadCouncillors(repo)]
	if not force_reconcile:
		steps.append(ResolveEmails(_resolver, max_searches=max_searches))
	steps.append(ReconcileSources(lambda: build_dataset_sources(settings), force=force_reconcile))
	steps.append(PersistResults(repo))
	return Pipeline(steps), collaborators


def _run(args, force_reconcile=False):
	settings = get_settings()
	if not os.getenv("RUN_ID"):
		os.environ["RUN_ID"] = _uuid.uuid4().hex
	max_searches = getattr(args, "max_searches", None)
	if max_searches is None:
		max_searches = settings.max_searches_per_run

	conn, repo = _open_repo(args)
	try:
		pipeline, collaborators = _build_pipeline(repo, settings, max_searches, force_reconcile)
		ctx = pipeline.run(RunContext())
	finally:
		_close(conn)

	logging.info(run_summary(ctx.meta), extra={"run_id": os.getenv("RUN_ID")})
	if getattr(args, "summary", False):
		api_usage = collaborators["google"].get_api_usage() if "google" in collaborators else None
		print_summary(ctx.meta, api_usage)
	return ctx


def cmd_run(args):
	_run(args)


def cmd_reconcile(args):
	_run(args, force_reconcile=True)


def cmd_report(args):
	conn, repo = _open_repo(args)
	try:
		counts = repo.email_status_counts()
	finally:
		conn.close()
	print(json.dumps(counts, indent=2))


def main():
	settings = get_settings()
	init_logging(settings.log_level)
	parser = argparse.ArgumentParser(description="Councillor email directory CLI")
	parser.add_argument("--db", default=settings.db_path, help="Path to SQLite DB (default from settings)")
	sub = parser.add_subparsers(dest="cmd", required=True)

	p_boot = sub.add_parser("bootstrap", help="Create the councillor table")
	p_boot.set_defaults(func=cmd_bootstrap)

	p_run = sub.add_parser("run", help="Resolve pending emails, or pull new rows when nothing is pending")
	p_run.add_argument("--max-searches", type=int, default=None, help=f"Search budget for this run (default: {settings.max_searches_per_run})")
	p_run.add_argument("--summary", action="store_true", help="Print a run summary")
	p_run.set_defaults(func=cmd_run)

	p_rec = sub.add_parser("reconcile", help="Pull configured datasets and add new rows now")
	p_rec.add_argument("--summary", action="store_true", help="Print a run summary")
	p_rec.set_defaults(func=cmd_reconcile)

	p_rep = sub.add_parser("report", help="Count rows by email state")
	p_rep.set_defaults(func=cmd_report)

	args = parser.parse_args()
	args.func(args)


if __name__ == "__main__":
	main()
