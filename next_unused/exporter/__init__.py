from next_unused.exporter.file_remover import delete_files
from next_unused.exporter.report_writer import write_report

__all__ = ["delete_files", "write_report"]
