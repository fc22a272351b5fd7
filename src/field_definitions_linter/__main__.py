"""Package entry point - composition root. Wire dependencies and run the CLI app."""

from field_definitions_linter.infrastructure.di.container import FieldDefinitionsContainer
from field_definitions_linter.interface.cli import CLIAppFactory, CLIDependencies


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    container = FieldDefinitionsContainer()

    deps = CLIDependencies(
        config_loader=container.get_config_loader(),
        telemetry=container.get_telemetry(),
        reporter=container.get_reporter(),
        astroid_gateway=container.get_astroid_gateway(),
        filesystem=container.get_filesystem_gateway(),
        fixer_gateway=container.get_fixer_gateway(),
    )

    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
