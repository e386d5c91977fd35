import pytest

from gwsnippets import drive

def test_delete(drive_service):
    files = drive_service.files.return_value
    drive.delete('file-1')
    files.delete.assert_called_once_with(fileId='file-1')
    files.delete.return_value.execute.assert_called_once_with(http=None)

def test_delete_with_http(drive_service):
    http = object()
    drive.delete('file-1', http=http)
    drive_service.files.return_value.delete.return_value.execute.assert_called_once_with(http=http)

def test_delete_needs_id(drive_service):
    with pytest.raises(ValueError):
        drive.delete('')
    drive_service.files.assert_not_called()
