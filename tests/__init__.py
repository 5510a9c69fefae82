# Auto-generated __init__.py

from . import conftest
from .conftest import expected_digest
from .conftest import mock_client
from .conftest import serve_hello
from .conftest import site_dir
from . import test_cli
from .test_cli import test_cli_algorithm_from_settings
from .test_cli import test_cli_compare_match
from .test_cli import test_cli_compare_mismatch_prints_both
from .test_cli import test_cli_compare_rejects_bad_arguments
from .test_cli import test_cli_malformed_settings_fails_cleanly
from .test_cli import test_cli_missing_target_fails
from .test_cli import test_cli_prints_json_for_file
from .test_cli import test_cli_writes_output_file
from . import test_compare
from .test_compare import test_different_files_do_not_match
from .test_compare import test_identical_files_match
from .test_compare import test_local_file_against_remote
from .test_compare import test_missing_target_propagates
from .test_compare import test_validate_compare_accepts_two_distinct
from .test_compare import test_validate_compare_rejects
from .test_compare import write_pair
from . import test_digest
from .test_digest import broken_stream
from .test_digest import chunked
from .test_digest import test_all_does_not_change_sha256_value
from .test_digest import test_all_yields_three_records_with_bit_prefixes
from .test_digest import test_chunking_does_not_affect_digest
from .test_digest import test_records_carry_tag_and_local_source
from .test_digest import test_repeated_digest_is_stable
from .test_digest import test_single_algorithm_known_vector
from .test_digest import test_stream_read_error_aborts
from .test_digest import test_unknown_algorithm_rejected
from . import test_fanout
from .test_fanout import delayed
from .test_fanout import failing
from .test_fanout import test_empty_fan_out
from .test_fanout import test_first_completed_error_wins_after_join
from .test_fanout import test_results_keep_submission_order
from . import test_generate
from .test_generate import test_all_on_single_target
from .test_generate import test_directory_output_is_sorted
from .test_generate import test_empty_directory_raises
from .test_generate import test_fetch_error_propagates
from .test_generate import test_multiple_targets_are_merged
from .test_generate import test_no_targets_rejected
from .test_generate import test_one_failing_target_fails_the_call
from .test_generate import test_remote_and_local_share_digest
from .test_generate import test_sync_wrapper
from .test_generate import test_timeout_bounds_remote_targets
from .test_generate import test_unknown_algorithm_rejected_before_io
from . import test_models
from .test_models import test_file_names
from .test_models import test_record_is_immutable
from .test_models import test_record_source_only_for_remote_targets
from .test_models import test_remote_detection
from . import test_settings
from .test_settings import test_defaults_without_file
from .test_settings import test_malformed_settings_file
from .test_settings import test_missing_file_uses_defaults
from .test_settings import test_settings_must_be_an_object
from .test_settings import test_user_settings_merge_per_section
from . import test_targets
from .test_targets import test_body_read_failure_closes_response
from .test_targets import test_classify_absolute_local_path_is_not_remote
from .test_targets import test_classify_directory
from .test_targets import test_classify_empty_file_is_not_regular
from .test_targets import test_classify_missing_path_falls_back_to_directory
from .test_targets import test_classify_regular_file
from .test_targets import test_classify_url
from .test_targets import test_directory_fails_after_all_files_finish
from .test_targets import test_directory_is_union_of_files
from .test_targets import test_directory_skips_subdirectories
from .test_targets import test_download_accepts_error_status
from .test_targets import test_download_follows_redirects
from .test_targets import test_download_hashes_body_and_sets_source
from .test_targets import test_download_timeout_raises_fetch_error
from .test_targets import test_download_transport_error_raises_fetch_error
from .test_targets import test_empty_directory_yields_nothing
from .test_targets import test_file_matches_remote_digest_without_source
from .test_targets import test_handle_target_dispatches_by_kind
from .test_targets import test_missing_directory_raises_list_error
from .test_targets import test_missing_file_raises_open_error
from .test_targets import test_read_failure_closes_file
from .test_targets import test_slow_body_hits_overall_deadline
from . import test_writer
from .test_writer import sample_records
from .test_writer import test_build_output_groups_by_file_then_algorithm
from .test_writer import test_render_output_keeps_markup_unescaped
from .test_writer import test_tags
from .test_writer import test_write_output
from .test_writer import test_write_output_to_missing_folder

__all__ = [
    "conftest",
    "test_cli",
    "test_compare",
    "test_digest",
    "test_fanout",
    "test_generate",
    "test_models",
    "test_settings",
    "test_targets",
    "test_writer",
    "broken_stream",
    "chunked",
    "delayed",
    "expected_digest",
    "failing",
    "mock_client",
    "sample_records",
    "serve_hello",
    "site_dir",
    "test_all_does_not_change_sha256_value",
    "test_all_on_single_target",
    "test_all_yields_three_records_with_bit_prefixes",
    "test_body_read_failure_closes_response",
    "test_build_output_groups_by_file_then_algorithm",
    "test_chunking_does_not_affect_digest",
    "test_classify_absolute_local_path_is_not_remote",
    "test_classify_directory",
    "test_classify_empty_file_is_not_regular",
    "test_classify_missing_path_falls_back_to_directory",
    "test_classify_regular_file",
    "test_classify_url",
    "test_cli_algorithm_from_settings",
    "test_cli_compare_match",
    "test_cli_compare_mismatch_prints_both",
    "test_cli_compare_rejects_bad_arguments",
    "test_cli_malformed_settings_fails_cleanly",
    "test_cli_missing_target_fails",
    "test_cli_prints_json_for_file",
    "test_cli_writes_output_file",
    "test_defaults_without_file",
    "test_different_files_do_not_match",
    "test_directory_fails_after_all_files_finish",
    "test_directory_is_union_of_files",
    "test_directory_output_is_sorted",
    "test_directory_skips_subdirectories",
    "test_download_accepts_error_status",
    "test_download_follows_redirects",
    "test_download_hashes_body_and_sets_source",
    "test_download_timeout_raises_fetch_error",
    "test_download_transport_error_raises_fetch_error",
    "test_empty_directory_raises",
    "test_empty_directory_yields_nothing",
    "test_empty_fan_out",
    "test_fetch_error_propagates",
    "test_file_matches_remote_digest_without_source",
    "test_file_names",
    "test_first_completed_error_wins_after_join",
    "test_handle_target_dispatches_by_kind",
    "test_identical_files_match",
    "test_local_file_against_remote",
    "test_malformed_settings_file",
    "test_missing_directory_raises_list_error",
    "test_missing_file_raises_open_error",
    "test_missing_file_uses_defaults",
    "test_missing_target_propagates",
    "test_multiple_targets_are_merged",
    "test_no_targets_rejected",
    "test_one_failing_target_fails_the_call",
    "test_read_failure_closes_file",
    "test_record_is_immutable",
    "test_record_source_only_for_remote_targets",
    "test_records_carry_tag_and_local_source",
    "test_remote_and_local_share_digest",
    "test_remote_detection",
    "test_render_output_keeps_markup_unescaped",
    "test_repeated_digest_is_stable",
    "test_results_keep_submission_order",
    "test_settings_must_be_an_object",
    "test_single_algorithm_known_vector",
    "test_slow_body_hits_overall_deadline",
    "test_stream_read_error_aborts",
    "test_sync_wrapper",
    "test_tags",
    "test_timeout_bounds_remote_targets",
    "test_unknown_algorithm_rejected",
    "test_unknown_algorithm_rejected_before_io",
    "test_user_settings_merge_per_section",
    "test_validate_compare_accepts_two_distinct",
    "test_validate_compare_rejects",
    "test_write_output",
    "test_write_output_to_missing_folder",
    "write_pair",
]
