import support  # noqa: F401  (sys.path setup)


def test_can_import_all_protocols():
    # Import must succeed and expose the expected names
    import docfmt.core.interfaces as I

    assert hasattr(I, "AssemblyEngineProtocol")
    assert hasattr(I, "DataReaderProtocol")
    assert hasattr(I, "DataReaderRegistryProtocol")
    assert hasattr(I, "LoggerFactoryProtocol")
    assert hasattr(I, "LoggerLikeProtocol")
    assert hasattr(I, "OutputWriterProtocol")
    assert hasattr(I, "TemplateEngineProtocol")
    assert hasattr(I, "TemplateLookupProtocol")
    assert hasattr(I, "TreeCollectorProtocol")


def test_default_components_satisfy_protocols():
    import docfmt.core.interfaces as I
    from docfmt.io.output import FileOutputWriter
    from docfmt.io.readers import DataReaderRegistry
    from docfmt.io.walker import TreeCollector
    from docfmt.rendering.execution import AssemblyEngine
    from docfmt.rendering.template_engine import JinjaTemplateEngine
    from docfmt.runtime.container import EngineBuilder

    assert isinstance(EngineBuilder().build(), AssemblyEngine)
    assert isinstance(FileOutputWriter(), I.OutputWriterProtocol)
    assert isinstance(DataReaderRegistry.default(), I.DataReaderRegistryProtocol)
    assert isinstance(TreeCollector(), I.TreeCollectorProtocol)
    assert isinstance(JinjaTemplateEngine(), I.TemplateEngineProtocol)


def test_logger_factory_satisfies_protocols():
    import io

    import docfmt.core.interfaces as I
    from docfmt.logging.factory import DefaultLoggerFactory
    from docfmt.logging.helpers import setup_base_logger

    factory = DefaultLoggerFactory(stream=io.StringIO())
    assert isinstance(factory, I.LoggerFactoryProtocol)
    try:
        assert isinstance(factory.get_logger("walker"), I.LoggerLikeProtocol)
    finally:
        setup_base_logger()
