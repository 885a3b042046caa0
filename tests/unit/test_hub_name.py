# -------------------------------------------------------------------------
# Copyright (c) Microsoft Corporation. All rights reserved.
# Licensed under the MIT License. See License.txt in the project root for
# license information.
# --------------------------------------------------------------------------

import logging
import pytest
from azure.iot.explorer.hub_name import CHECK_FAILED_MESSAGE, HubNameNegotiator
from azure.iot.explorer.models import NameAvailability
from azure.iot.explorer.validation import validate_iothub_name

logging.basicConfig(level=logging.DEBUG)


class FakeHttpError(Exception):
    def __init__(self, body):
        super().__init__()
        self.body = body


@pytest.fixture
def negotiator(mock_prompt):
    return HubNameNegotiator(mock_prompt)


@pytest.mark.describe("HubNameNegotiator - .negotiate()")
class TestNegotiate(object):
    @pytest.mark.it("Prompts for a name, validated as an IoT Hub name")
    async def test_prompt(self, negotiator, mock_prompt, mock_control_plane):
        mock_prompt.show_input_box.return_value = "my-hub"

        await negotiator.negotiate(mock_control_plane)

        kwargs = mock_prompt.show_input_box.call_args[1]
        assert kwargs["validate_input"] is validate_iothub_name

    @pytest.mark.it("Returns the name if it is available")
    async def test_available(self, negotiator, mock_prompt, mock_control_plane):
        mock_prompt.show_input_box.return_value = "my-hub"

        assert await negotiator.negotiate(mock_control_plane) == "my-hub"
        assert mock_control_plane.check_name_availability.call_args == (("my-hub",),)
        assert mock_prompt.show_error_message.call_count == 0

    @pytest.mark.it("Returns None without checking availability if the prompt is dismissed")
    @pytest.mark.parametrize(
        "dismissal", [pytest.param(None, id="None"), pytest.param("", id="Empty")]
    )
    async def test_dismissed(self, negotiator, mock_prompt, mock_control_plane, dismissal):
        mock_prompt.show_input_box.return_value = dismissal

        assert await negotiator.negotiate(mock_control_plane) is None
        assert mock_control_plane.check_name_availability.call_count == 0

    @pytest.mark.it("Reports a name that is taken and prompts again")
    async def test_taken(self, negotiator, mock_prompt, mock_control_plane):
        mock_prompt.show_input_box.side_effect = ["taken-hub", "free-hub"]
        mock_control_plane.check_name_availability.side_effect = [
            NameAvailability(False, "AlreadyExists"),
            NameAvailability(True),
        ]

        assert await negotiator.negotiate(mock_control_plane) == "free-hub"
        assert mock_prompt.show_input_box.call_count == 2
        assert mock_prompt.show_error_message.call_args == (
            ("IoT Hub name 'taken-hub' is not available.",),
        )

    @pytest.mark.it("Reports a failed availability check and prompts again")
    async def test_check_fails(self, negotiator, mock_prompt, mock_control_plane):
        mock_prompt.show_input_box.side_effect = ["my-hub", "my-hub"]
        mock_control_plane.check_name_availability.side_effect = [
            FakeHttpError({"message": "token expired"}),
            NameAvailability(True),
        ]

        assert await negotiator.negotiate(mock_control_plane) == "my-hub"
        assert mock_prompt.show_error_message.call_args == (("token expired",),)

    @pytest.mark.it("Reports a generic message if the failed check carries no message")
    async def test_check_fails_without_message(self, negotiator, mock_prompt, mock_control_plane):
        mock_prompt.show_input_box.side_effect = ["my-hub", None]
        mock_control_plane.check_name_availability.side_effect = FakeHttpError(None)

        assert await negotiator.negotiate(mock_control_plane) is None
        assert mock_prompt.show_error_message.call_args == ((CHECK_FAILED_MESSAGE,),)
