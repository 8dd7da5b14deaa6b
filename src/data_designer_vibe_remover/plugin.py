from data_designer.plugins.plugin import Plugin, PluginType

vibe_remover_plugin = Plugin(
    config_qualified_name="data_designer_vibe_remover.config.VibeRemoverColumnConfig",
    impl_qualified_name="data_designer_vibe_remover.generator.VibeRemoverColumnGenerator",
    plugin_type=PluginType.COLUMN_GENERATOR,
)
