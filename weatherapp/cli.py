"""CLI entry point for the weather client."""

import argparse
import asyncio
import logging

from weatherapp.config.loader import get_config_value, load_config
from weatherapp.config.schema import AppConfig
from weatherapp.reporting.formatters import (
    format_chart_text,
    format_forecast_text,
    format_history_text,
    format_weather_text,
)
from weatherapp.session.app import WeatherSession

DEFAULT_CONFIG = "configs/default.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherapp",
        description="Weather and forecast client for Indian cities",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # weather / chart
    weather_p = sub.add_parser("weather", help="Current weather and forecast for a city")
    weather_p.add_argument("city", nargs="+", help="City name")
    chart_p = sub.add_parser("chart", help="Forecast temperature trend for a city")
    chart_p.add_argument("city", nargs="+", help="City name")

    # suggest
    suggest_p = sub.add_parser("suggest", help="Autocomplete city names")
    suggest_p.add_argument("prefix", help="City name prefix")

    # history / history clear
    history_p = sub.add_parser("history", help="Show recent searches")
    history_sub = history_p.add_subparsers(dest="history_command")
    history_sub.add_parser("clear", help="Clear search history")

    # config show / get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display resolved config")
    get_p = config_sub.add_parser("get", help="Print one config value")
    get_p.add_argument("key", help="Dotted key, e.g. api.base_url")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "weather":
        return asyncio.run(_cmd_weather(config, " ".join(args.city)))
    elif args.command == "chart":
        return asyncio.run(_cmd_chart(config, " ".join(args.city)))
    elif args.command == "suggest":
        return asyncio.run(_cmd_suggest(config, args.prefix))
    elif args.command == "history":
        return asyncio.run(_cmd_history(config, args))
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


async def _cmd_weather(config: AppConfig, city: str) -> int:
    async with WeatherSession(config) as session:
        ok = await session.search(city)
        state = session.state
        if not ok or state.current_weather is None:
            print(f"Error: {state.error or 'no weather data'}")
            return 1
        await session.history.drain()
        print(format_weather_text(state.current_weather))
        print()
        print(format_forecast_text(state.forecast))
        print()
        print(format_chart_text(session.chart()))
        return 0


async def _cmd_chart(config: AppConfig, city: str) -> int:
    async with WeatherSession(config) as session:
        if not await session.search(city):
            print(f"Error: {session.state.error}")
            return 1
        print(format_chart_text(session.chart()))
        return 0


async def _cmd_suggest(config: AppConfig, prefix: str) -> int:
    async with WeatherSession(config) as session:
        await session.type_query(prefix)
        suggestions = session.state.suggestions
        if not suggestions:
            print("No matching cities")
            return 0
        for city in suggestions:
            print(city)
        return 0


async def _cmd_history(config: AppConfig, args) -> int:
    session = WeatherSession(config)
    try:
        if args.history_command == "clear":
            if await session.clear_history():
                print("Search history cleared")
                return 0
            print("Error: could not clear search history")
            return 1

        if not await session.history.refresh():
            print("Error: could not load search history")
            return 1
        print(format_history_text(session.state.history, config.clock.locale))
        return 0
    finally:
        await session.stop()


def _cmd_config(config: AppConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "get":
        try:
            print(get_config_value(config, args.key))
        except KeyError as e:
            print(f"Error: {e}")
            return 1
        return 0
    print("Use: config show | config get KEY")
    return 1
