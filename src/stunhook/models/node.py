"""
STUN port-forward node models.

A [StunNode][stunhook.models.node.StunNode] describes one relay rule as the
node list API reports it. Only ``name`` and ``public_addr`` drive the
forwarding run; the remaining fields are decoded with their declared types
and carried through unchanged.

Note:
    The API spells its history keys ``PublicAddrHistroy`` and
    ``WebhookCallHistroy``. The aliases below match that spelling; the Python
    attribute names use the correct one.
"""

from __future__ import annotations

from pydantic import Field, StrictBool, StrictInt, StrictStr

from .base import BaseDocument


class AddrRecord(BaseDocument):
    """One past public address of a node and when it was observed."""

    addr: StrictStr = Field(default="", alias="AddrRecord")
    update_time: StrictStr = Field(default="", alias="UpdateTime")


class NodeOptions(BaseDocument):
    """Relay options: connection limits, TLS, encryption and speed limits."""

    single_proxy_max_tcp_connections: StrictInt = Field(
        default=0, alias="SingleProxyMaxTCPConnections"
    )
    single_proxy_max_udp_read_goroutines: StrictInt = Field(
        default=0, alias="SingleProxyMaxUDPReadTargetDatagoroutineCount"
    )
    udp_session_timeout: StrictInt = Field(default=0, alias="UDPSessionTimeout")
    safe_mode: StrictStr = Field(default="", alias="SafeMode")

    # TLS
    tcp_listen_tls: StrictBool = Field(default=False, alias="TCPListenTLS")
    tcp_relay_tls: StrictBool = Field(default=False, alias="TCPRelayTLS")
    tcp_relay_tls_server_name: StrictStr = Field(default="", alias="TCPRelayTLSServerName")
    tcp_relay_tls_insecure_skip_verify: StrictBool = Field(
        default=False, alias="TCPRelayTLSInsecureSkipVerify"
    )

    # Stream and datagram encryption
    tcp_stream_encryption_source: StrictBool = Field(
        default=False, alias="TCPStreamEncryptionSource"
    )
    tcp_stream_encryption_accept: StrictBool = Field(
        default=False, alias="TCPStreamEncryptionAccept"
    )
    tcp_stream_encryption_key: StrictStr = Field(default="", alias="TCPStreamEncryptionKey")
    udp_packet_source_encryption: StrictBool = Field(
        default=False, alias="UDPPacketSourceEncryption"
    )
    udp_packet_accept_encryption: StrictBool = Field(
        default=False, alias="UDPPacketAcceptEncryption"
    )
    udp_packet_encryption_key: StrictStr = Field(default="", alias="UDPPacketEncryptionKey")
    udp_packet_size: StrictInt = Field(default=0, alias="UDPPacketSize")

    # Speed limits
    single_port_speed_limit: StrictBool = Field(default=False, alias="SinglePortSpeedLimit")
    single_port_send_speed_limit: StrictInt = Field(default=0, alias="SinglePortSendSpeedLimit")
    single_port_rece_speed_limit: StrictInt = Field(default=0, alias="SinglePortReceSpeedLimit")
    rule_speed_limit: StrictBool = Field(default=False, alias="RuleSpeedLimit")
    rule_send_speed_limit: StrictInt = Field(default=0, alias="RuleSendSpeedLimit")
    rule_rece_speed_limit: StrictInt = Field(default=0, alias="RuleReceSpeedLimit")


class NodeStatistics(BaseDocument):
    """Traffic and live connection counters for one node."""

    traffic_in: StrictInt = Field(default=0, alias="TrafficIn")
    traffic_out: StrictInt = Field(default=0, alias="TrafficOut")
    tcp_current_connections: StrictInt = Field(default=0, alias="TCPCurrentConnections")
    udp_current_connections: StrictInt = Field(default=0, alias="UDPCurrentConnections")


class StunNode(BaseDocument):
    """One STUN port-forward node.

    Attributes:
        name: Display name. Not guaranteed unique across a document.
        public_addr: Externally reachable address, ``host:port``.
    """

    key: StrictStr = Field(default="", alias="Key")
    name: StrictStr = Field(default="", alias="Name")
    stun_type: StrictStr = Field(default="", alias="StunType")
    enable: StrictBool = Field(default=False, alias="Enable")
    disable_port_forward: StrictBool = Field(default=False, alias="DisablePortForward")
    last_logs: StrictStr = Field(default="", alias="LastLogs")
    stun_local_addr: StrictStr = Field(default="", alias="StunLocalAddr")
    target_addr_list: list[StrictStr] = Field(default_factory=list, alias="TargetAddrList")

    public_addr: StrictStr = Field(default="", alias="PublicAddr")
    public_addr_info: StrictStr = Field(default="", alias="PublicAddrInfo")
    public_addr_history: list[AddrRecord] = Field(
        default_factory=list, alias="PublicAddrHistroy"
    )

    # Per-node webhook
    webhook_enable: StrictBool = Field(default=False, alias="WebhookEnable")
    webhook_proxy: StrictStr = Field(default="", alias="WebhookProxy")
    webhook_call_time: StrictStr = Field(default="", alias="WebhookCallTime")
    webhook_call_result: StrictBool = Field(default=False, alias="WebhookCallResult")
    webhook_call_error_msg: StrictStr = Field(default="", alias="WebhookCallErrorMsg")
    webhook_call_history: list[StrictStr] = Field(
        default_factory=list, alias="WebhookCallHistroy"
    )

    # Global webhook
    global_webhook: StrictBool = Field(default=False, alias="GlobalWebhook")
    global_webhook_call_time: StrictStr = Field(default="", alias="GlobalWebhookCallTime")
    global_webhook_call_result: StrictBool = Field(default=False, alias="GlobalWebhookCallResult")
    global_webhook_call_error_msg: StrictStr = Field(
        default="", alias="GlobalWebhookCallErrorMsg"
    )
    global_webhook_call_history: list[StrictStr] = Field(
        default_factory=list, alias="GlobalWebhookCallHistroy"
    )

    options: NodeOptions = Field(default_factory=NodeOptions, alias="Options")
