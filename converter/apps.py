from django.apps import AppConfig


class ConverterConfig(AppConfig):
    name = 'converter'
    verbose_name = 'DFA to regular expression converter'
