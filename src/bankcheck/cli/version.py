def package_version() -> str:
    from importlib.metadata import version, PackageNotFoundError
    try:
        return version('bankcheck')
    except PackageNotFoundError:
        return '0.0.0-dev'
