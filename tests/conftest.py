"""Pytest fixtures for gofilepy tests."""
import asyncio
import hashlib
import time

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from gofilepy import GofileClient, APIConfig, AsyncAPIClient


class FakeGofileService:
    """
    In-process stand-in for the broker and worker servers.

    Keeps uploads in memory so uploads, lookups, downloads and removals
    can be chained. Worker routes are prefixed with the server name
    handed out by the broker.
    """

    def __init__(self):
        self.base_url = ''
        self.default_server = 'store1'
        self.broker_status = 'ok'
        self.broker_body = None
        self.upload_response = None
        self.download_delays = {}
        self.failing_downloads = set()
        self.uploads = {}
        self.requests = []
        self.download_headers = []
        self.last_form = None
        self._counter = 0

    def app(self) -> web.Application:
        app = web.Application()
        app.router.add_get('/getServer', self.get_server)
        app.router.add_post('/{server}/upload', self.upload)
        app.router.add_get('/{server}/getUpload', self.get_upload)
        app.router.add_get('/{server}/deleteUpload', self.delete_upload)
        app.router.add_get('/{server}/download/{code}/{key}/{name}', self.download)
        return app

    def paths(self):
        return [path for path, _ in self.requests]

    def _record(self, request):
        self.requests.append((request.path, dict(request.query)))

    def _lookup(self, request):
        upload = self.uploads.get(request.query.get('c'))
        if upload is None or upload['server'] != request.match_info['server']:
            return None
        return upload

    async def get_server(self, request):
        self._record(request)
        if self.broker_body is not None:
            return web.Response(body=self.broker_body, content_type='text/html', charset='utf-8')
        if self.broker_status != 'ok':
            return web.json_response({'status': self.broker_status, 'data': {}})
        upload = self.uploads.get(request.query.get('c'))
        server = upload['server'] if upload else self.default_server
        return web.json_response({'status': 'ok', 'data': {'server': server}})

    async def upload(self, request):
        self._record(request)
        files = []
        fields = {}
        reader = await request.multipart()
        while True:
            part = await reader.next()
            if part is None:
                break
            if part.name == 'filesUploaded':
                files.append((part.filename, bytes(await part.read())))
            else:
                fields[part.name] = await part.text()
        self.last_form = {'files': files, 'fields': fields}

        if self.upload_response is not None:
            return web.json_response(self.upload_response)
        if not files:
            return web.json_response({'status': 'error-noFile', 'data': {}})

        self._counter += 1
        code = f"up{self._counter}"
        self.uploads[code] = {
            'server': request.match_info['server'],
            'removal_code': f"rm{self._counter}",
            'password': fields.get('password'),
            'description': fields.get('description'),
            'expire': fields.get('expire'),
            'upload_time': int(time.time()),
            'files': {
                str(i): {'name': name or f"file{i}", 'content': content}
                for i, (name, content) in enumerate(files)
            },
        }
        return web.json_response({
            'status': 'ok',
            'data': {'code': code, 'removalCode': f"rm{self._counter}"}
        })

    async def get_upload(self, request):
        self._record(request)
        upload = self._lookup(request)
        if upload is None:
            return web.json_response({'status': 'error-notFound', 'data': {}})
        if upload['password']:
            expected = hashlib.sha256(upload['password'].encode()).hexdigest()
            if request.query.get('p') != expected:
                return web.json_response({'status': 'error-passwordRequired', 'data': {}})

        code = request.query['c']
        server = request.match_info['server']
        files = {
            key: {
                'name': f['name'],
                'size': len(f['content']),
                'md5': hashlib.md5(f['content']).hexdigest(),
                'mimetype': 'application/octet-stream',
                'link': f"{self.base_url}{server}/download/{code}/{key}/{f['name']}",
            }
            for key, f in upload['files'].items()
        }
        return web.json_response({
            'status': 'ok',
            'data': {
                'code': code,
                'server': server,
                'uploadTime': upload['upload_time'],
                'totalSize': sum(len(f['content']) for f in upload['files'].values()),
                'views': 0,
                'hasZip': 0,
                'files': files,
            }
        })

    async def delete_upload(self, request):
        self._record(request)
        upload = self._lookup(request)
        if upload is None:
            return web.json_response({'status': 'error-notFound', 'data': {}})
        if request.query.get('rc') != upload['removal_code']:
            return web.json_response({'status': 'error-wrongRemovalCode', 'data': {}})
        del self.uploads[request.query['c']]
        return web.json_response({'status': 'ok', 'data': {}})

    async def download(self, request):
        self._record(request)
        self.download_headers.append(request.headers.copy())
        upload = self.uploads.get(request.match_info['code'])
        name = request.match_info['name']
        await asyncio.sleep(self.download_delays.get(name, 0))
        if upload is None or name in self.failing_downloads:
            return web.Response(status=404, text='not found')
        content = upload['files'][request.match_info['key']]['content']
        return web.Response(body=content)

    def add_upload(self, code, files, server='store1', password=None, removal_code='secret'):
        """Seed an upload. `files` maps manifest key -> (name, content)."""
        self.uploads[code] = {
            'server': server,
            'removal_code': removal_code,
            'password': password,
            'description': None,
            'expire': None,
            'upload_time': 1700000000,
            'files': {
                key: {'name': name, 'content': content}
                for key, (name, content) in files.items()
            },
        }


@pytest_asyncio.fixture
async def fake_service():
    """Running fake service."""
    service = FakeGofileService()
    async with TestServer(service.app()) as server:
        service.base_url = str(server.make_url('/'))
        yield service


@pytest.fixture
def api_config(fake_service):
    """Configuration pointing at the fake service."""
    return APIConfig(
        broker_url=fake_service.base_url,
        worker_url_template=fake_service.base_url + '{server}/'
    )


@pytest_asyncio.fixture
async def api_client(api_config):
    """Open AsyncAPIClient bound to the fake service."""
    async with AsyncAPIClient(api_config) as api:
        yield api


@pytest_asyncio.fixture
async def client(api_config):
    """Open GofileClient bound to the fake service."""
    async with GofileClient(api_config) as gofile:
        yield gofile
