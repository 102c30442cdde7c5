from kata.packages import Dependency, Language, Package, PackageBuilder, main


def test_defaults():
    package = PackageBuilder("base64").build()
    assert package.name == "base64"
    assert package.version == "0.1"
    assert package.authors == []
    assert package.dependencies == []
    assert package.language is None


def test_version_and_language():
    package = PackageBuilder("log").version("0.4").language(Language.RUST).build()
    assert package.version == "0.4"
    assert package.language is Language.RUST


def test_as_dependency_round_trip():
    package = PackageBuilder("base64").version("0.13").build()
    dependency = package.as_dependency()
    assert dependency == Dependency("base64", "0.13")
    assert dependency.name == package.name
    assert dependency.version_expression == package.version


def test_dependencies_keep_order():
    base64 = PackageBuilder("base64").version("0.13").build()
    log = PackageBuilder("log").version("0.4").build()
    serde = (
        PackageBuilder("serde")
        .authors(["djmitche"])
        .version("4.0")
        .dependency(base64.as_dependency())
        .dependency(log.as_dependency())
        .build()
    )
    assert serde.authors == ["djmitche"]
    assert serde.version == "4.0"
    assert serde.dependencies == [base64.as_dependency(), log.as_dependency()]


def test_builder_methods_chain():
    builder = PackageBuilder("x")
    assert builder.version("1") is builder
    assert builder.authors([]) is builder
    assert builder.language(Language.PERL) is builder


def test_built_package_independent_of_builder():
    builder = PackageBuilder("serde")
    first = builder.build()
    builder.dependency(Dependency("log", "0.4"))
    assert first.dependencies == []
    assert builder.build().dependencies == [Dependency("log", "0.4")]


def test_package_equality():
    assert PackageBuilder("log").build() == Package("log")


def test_main_prints_packages(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert [line.split(":", 1)[0] for line in lines] == ["base64", "log", "serde"]
    assert "djmitche" in lines[2]