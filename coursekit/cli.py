from pathlib import Path
import logging
import click
import os
from canvasapi import Canvas
import yaml
from mako.template import Template

from coursekit.enrollment import enroll_students, read_enrollment, write_roster_csv
from coursekit.enums import StudentUpdateStatus
from coursekit.exceptions import ConfigurationError, CourseKitError
from coursekit.roster import downloadRoster
from coursekit.student import StudentAttributes

SORT_ORDERS = {
    "section": StudentAttributes.sort_by_section_name,
    "team": StudentAttributes.sort_by_team_name,
    "name": StudentAttributes.sort_by_name_and_then_by_email,
}


class Configuration(object):
    def __init__(self, lms_path=Path("./lms"), canvas=None, course=None):
        self.lms_path = lms_path
        self.canvas = canvas
        self.course = course

    def load_course(self):
        """Connect to Canvas on first use"""
        if self.course is not None:
            return self.course
        if "CANVAS_API_KEY" not in os.environ:
            raise ConfigurationError(
                "CANVAS_API_KEY environment variable not set", ["CANVAS_API_KEY"]
            )
        lms_yml = self.lms_path / "lms.yml"
        if not lms_yml.exists():
            raise ConfigurationError("Does not appear to be a course template (lms.yml missing)")
        yml = Template(filename=lms_yml.as_posix()).render()
        global_metadata = yaml.safe_load(yml) or {}
        missing = [key for key in ("canvas_url", "canvas_page_id") if key not in global_metadata]
        if missing:
            raise ConfigurationError(f"{lms_yml} is missing {', '.join(missing)}", missing)
        self.canvas = Canvas(global_metadata["canvas_url"], os.getenv("CANVAS_API_KEY"))
        self.course = self.canvas.get_course(global_metadata["canvas_page_id"])
        return self.course


def _load(path, course_id, ctx):
    try:
        return read_enrollment(Path(path), course_id)
    except CourseKitError as e:
        click.echo(f"{path}: {e.message}" + (f" (line {e.details['line']})" if "line" in e.details else ""))
        ctx.exit(1)


@click.group()
@click.option("--lms", default="./lms", help="Specify the lms directory holding lms.yml")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging")
@click.pass_context
def cli(ctx, lms, verbose):
    """
    Manage the students and instructors of a course
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = Configuration(Path(lms))


@cli.command()
@click.option("--output", default="roster.csv", help="Specify the output file")
@click.pass_context
def roster(ctx, output):
    """
    Download the student roster of the Canvas course in csv format
    """
    try:
        course = ctx.obj.load_course()
    except ConfigurationError as e:
        click.echo(e.message)
        ctx.exit(1)
    downloadRoster(course, output)


@cli.command()
@click.argument("enrollment", type=click.Path(exists=True, dir_okay=False))
@click.option("-c", "--course", "course_id", required=True, help="Specify the course id")
@click.option(
    "-e",
    "--existing",
    type=click.Path(dir_okay=False),
    help="Specify the roster csv of students already enrolled",
)
@click.option("--output", default="enrollment.csv", help="Specify the output file")
@click.pass_context
def enroll(ctx, enrollment, course_id, existing, output):
    """
    Merge an enrollment list into the existing roster

    The enrollment list is a csv file or a text file of
    section|team|name|email|comments lines. Empty columns keep the
    values from the existing roster.
    """
    incoming = _load(enrollment, course_id, ctx)
    stored = []
    if existing and Path(existing).exists():
        stored = _load(existing, course_id, ctx)
    enrolled = enroll_students(incoming, stored)
    write_roster_csv(enrolled, output)

    errors = [student for student in enrolled if student.update_status == StudentUpdateStatus.ERROR]
    click.echo(f"Enrolled {len(enrolled) - len(errors)} students, {len(errors)} with errors")
    for student in errors:
        for error in student.get_invalidity_info():
            click.echo(f"  {student.email}: {error}")


@cli.command()
@click.argument("enrollment", type=click.Path(exists=True, dir_okay=False))
@click.option("-c", "--course", "course_id", required=True, help="Specify the course id")
@click.pass_context
def validate(ctx, enrollment, course_id):
    """
    Check an enrollment list for invalid students
    """
    students = _load(enrollment, course_id, ctx)
    invalid = 0
    for student in students:
        errors = student.get_invalidity_info()
        if errors:
            invalid += 1
            click.echo(student.to_enrollment_string())
            for error in errors:
                click.echo(f"  {error}")
    click.echo(f"{len(students) - invalid} valid, {invalid} invalid")
    if invalid:
        ctx.exit(1)


@cli.command()
@click.argument("enrollment", type=click.Path(exists=True, dir_okay=False))
@click.option("-c", "--course", "course_id", required=True, help="Specify the course id")
@click.option(
    "--by",
    type=click.Choice(list(SORT_ORDERS)),
    default="section",
    help="Sort by section, team or name",
)
@click.option("--output", default="sorted.csv", help="Specify the output file")
@click.pass_context
def sort(ctx, enrollment, course_id, by, output):
    """Sort a student list by section, team or name"""
    students = SORT_ORDERS[by](_load(enrollment, course_id, ctx))
    write_roster_csv(students, output)
    click.echo(f"Sorted {len(students)} students by {by}")
