import argparse
import datetime
import shutil

from algorithms import WeightConverter
from config import APP_VERSION, load_settings
from db import ReminderRepository
from errors import FitnessError, ValidationError
from logging_config import configure_logging
from reminder_service import ReminderRegistry
from stats_service import StatisticsService


def format_time(value: datetime.datetime, time_format: str = "24h") -> str:
    if time_format == "12h":
        return value.strftime("%I:%M %p").lstrip("0")
    return value.strftime("%H:%M")


def show_bmi(weight: str, height: str, unit: str, height_unit: str = "cm") -> None:
    stats = StatisticsService()
    if unit != "kg":
        try:
            weight = WeightConverter.to_kg(float(weight), unit)
        except (ValueError, OverflowError):
            raise ValidationError("weight must be a positive number")
    if height_unit != "cm":
        try:
            height = WeightConverter.to_cm(float(height), height_unit)
        except (ValueError, OverflowError):
            raise ValidationError("height must be a positive number")
    bmi = stats.compute_bmi(weight, height).body_mass_index
    print(f"Your BMI is: {bmi:.2f}")


def show_net_calories(consumed: str, burned: str) -> None:
    net = StatisticsService.net_calories(consumed, burned)
    print(f"Net Calories: {net} kcal")


def list_reminders(db_path: str, time_format: str = "24h") -> None:
    registry = ReminderRegistry(ReminderRepository(db_path))
    for record in registry.list():
        state = "" if record.enabled else " (disabled)"
        print(f"{record.id}  {format_time(record.scheduled_time, time_format)}  {record.title}{state}")


def add_reminder(db_path: str, title: str, time: str) -> str:
    """Store a reminder for today at ``time`` (HH:MM) and return its id."""
    try:
        clock = datetime.time.fromisoformat(time)
    except ValueError:
        raise ValidationError("time must be in HH:MM format")
    when = datetime.datetime.combine(datetime.date.today(), clock)
    registry = ReminderRegistry(ReminderRepository(db_path))
    return registry.create(title, when).id


def delete_reminder(db_path: str, reminder_id: str) -> None:
    registry = ReminderRegistry(ReminderRepository(db_path))
    registry.delete(reminder_id)


def backup_db(db_path: str, backup_path: str) -> None:
    shutil.copy(db_path, backup_path)


def restore_db(backup_path: str, db_path: str) -> None:
    shutil.copy(backup_path, db_path)


def main() -> None:
    parser = argparse.ArgumentParser(description="GainZ utility commands")
    parser.add_argument("--yaml", default="settings.yaml")
    parser.add_argument("--version", action="version", version=APP_VERSION)
    sub = parser.add_subparsers(dest="cmd", required=True)

    bmi = sub.add_parser("bmi")
    bmi.add_argument("--weight", required=True)
    bmi.add_argument("--height", required=True)
    bmi.add_argument("--unit", choices=["kg", "lb"], default=None)
    bmi.add_argument("--height-unit", choices=["cm", "in"], default="cm")

    net = sub.add_parser("net")
    net.add_argument("--consumed", required=True)
    net.add_argument("--burned", required=True)

    rem = sub.add_parser("reminders")
    rem.add_argument("--db", default="gainz.db")
    rem_sub = rem.add_subparsers(dest="action", required=True)
    rem_sub.add_parser("list")
    rem_add = rem_sub.add_parser("add")
    rem_add.add_argument("--title", required=True)
    rem_add.add_argument("--time", required=True, help="HH:MM")
    rem_del = rem_sub.add_parser("delete")
    rem_del.add_argument("id")

    bkp = sub.add_parser("backup")
    bkp.add_argument("--db", default="gainz.db")
    bkp.add_argument("--out", default="backup.db")

    rst = sub.add_parser("restore")
    rst.add_argument("--in", dest="src", default="backup.db")
    rst.add_argument("--db", default="gainz.db")

    args = parser.parse_args()
    settings = load_settings(args.yaml)
    configure_logging(settings.log_level)

    try:
        if args.cmd == "bmi":
            show_bmi(
                args.weight,
                args.height,
                args.unit or settings.weight_unit,
                args.height_unit,
            )
        elif args.cmd == "net":
            show_net_calories(args.consumed, args.burned)
        elif args.cmd == "reminders":
            if args.action == "list":
                list_reminders(args.db, settings.time_format)
            elif args.action == "add":
                print(add_reminder(args.db, args.title, args.time))
            else:
                delete_reminder(args.db, args.id)
        elif args.cmd == "backup":
            backup_db(args.db, args.out)
        elif args.cmd == "restore":
            restore_db(args.src, args.db)
    except (FitnessError, IndexError) as e:
        parser.exit(1, f"error: {e}\n")


if __name__ == "__main__":
    main()
