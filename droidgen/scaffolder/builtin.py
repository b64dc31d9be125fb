"""Built-in Android templates.

Each template is a fixed table of Kotlin file skeletons plus the manual steps
that have to be done by hand afterwards. Patterns may read the naming forms
(``name``, ``name_pascal``, ``name_camel``, ``name_snake``, ``name_lower``,
``name_plural``) and the convention slots (``package``, ``package_path``,
``source_root``, ``test_root``, ``viewmodel_base``).
"""

from __future__ import annotations

from droidgen.scaffolder.models import FileSkeleton, ManualStep, Template

_MAIN = "{{ source_root }}/{{ package_path }}"
_TEST = "{{ test_root }}/{{ package_path }}"


# ---------------------------------------------------------------------------
# screen
# ---------------------------------------------------------------------------

_SCREEN_UI_STATE = """\
package {{ package }}.ui.{{ name_lower }}

data class {{ name_pascal }}UiState(
    val isLoading: Boolean = false,
    val errorMessage: String? = null,
)
"""

_SCREEN_VIEW_MODEL = """\
package {{ package }}.ui.{{ name_lower }}

import androidx.lifecycle.ViewModel
import androidx.lifecycle.viewModelScope
import dagger.hilt.android.lifecycle.HiltViewModel
import javax.inject.Inject
import kotlinx.coroutines.flow.MutableStateFlow
import kotlinx.coroutines.flow.StateFlow
import kotlinx.coroutines.flow.asStateFlow
import kotlinx.coroutines.flow.update
import kotlinx.coroutines.launch

@HiltViewModel
class {{ name_pascal }}ViewModel @Inject constructor() : {{ viewmodel_base }}() {

    private val _uiState = MutableStateFlow({{ name_pascal }}UiState())
    val uiState: StateFlow<{{ name_pascal }}UiState> = _uiState.asStateFlow()

    fun load() {
        viewModelScope.launch {
            _uiState.update { it.copy(isLoading = true, errorMessage = null) }
            _uiState.update { it.copy(isLoading = false) }
        }
    }
}
"""

_SCREEN_COMPOSABLE = """\
package {{ package }}.ui.{{ name_lower }}

import androidx.compose.foundation.layout.Box
import androidx.compose.foundation.layout.fillMaxSize
import androidx.compose.material3.CircularProgressIndicator
import androidx.compose.material3.Text
import androidx.compose.runtime.Composable
import androidx.compose.runtime.LaunchedEffect
import androidx.compose.runtime.getValue
import androidx.compose.ui.Alignment
import androidx.compose.ui.Modifier
import androidx.hilt.navigation.compose.hiltViewModel
import androidx.lifecycle.compose.collectAsStateWithLifecycle

const val {{ name_snake | upper }}_ROUTE = "{{ name_snake }}"

@Composable
fun {{ name_pascal }}Screen(
    modifier: Modifier = Modifier,
    viewModel: {{ name_pascal }}ViewModel = hiltViewModel(),
) {
    val uiState by viewModel.uiState.collectAsStateWithLifecycle()

    LaunchedEffect(Unit) { viewModel.load() }

    Box(modifier = modifier.fillMaxSize(), contentAlignment = Alignment.Center) {
        when {
            uiState.isLoading -> CircularProgressIndicator()
            uiState.errorMessage != null -> Text(text = uiState.errorMessage.orEmpty())
            else -> Text(text = "{{ name_pascal }}")
        }
    }
}
"""

SCREEN = Template(
    id="screen",
    description="Jetpack Compose screen with a Hilt ViewModel and UI state",
    files=(
        FileSkeleton(
            path=_MAIN + "/ui/{{ name_lower }}/{{ name_pascal }}UiState.kt",
            body=_SCREEN_UI_STATE,
        ),
        FileSkeleton(
            path=_MAIN + "/ui/{{ name_lower }}/{{ name_pascal }}ViewModel.kt",
            body=_SCREEN_VIEW_MODEL,
        ),
        FileSkeleton(
            path=_MAIN + "/ui/{{ name_lower }}/{{ name_pascal }}Screen.kt",
            body=_SCREEN_COMPOSABLE,
        ),
    ),
    manual_steps=(
        ManualStep(
            text="Register the {{ name_pascal }}Screen route in the navigation graph",
            convention="navigation-path",
            target="the navigation graph (NavHost) file",
        ),
        ManualStep(text="Add string resources for {{ name_pascal }}Screen to res/values/strings.xml"),
    ),
)


# ---------------------------------------------------------------------------
# api
# ---------------------------------------------------------------------------

_API_DTO = """\
package {{ package }}.data.remote.dto

import com.google.gson.annotations.SerializedName

data class {{ name_pascal }}Dto(
    @SerializedName("id") val id: Long,
    @SerializedName("name") val name: String,
)
"""

_API_SERVICE = """\
package {{ package }}.data.remote

import {{ package }}.data.remote.dto.{{ name_pascal }}Dto
import retrofit2.http.Body
import retrofit2.http.DELETE
import retrofit2.http.GET
import retrofit2.http.POST
import retrofit2.http.Path

interface {{ name_pascal }}ApiService {

    @GET("{{ name_plural }}")
    suspend fun get{{ name_pascal }}List(): List<{{ name_pascal }}Dto>

    @GET("{{ name_plural }}/{id}")
    suspend fun get{{ name_pascal }}(@Path("id") id: Long): {{ name_pascal }}Dto

    @POST("{{ name_plural }}")
    suspend fun create{{ name_pascal }}(@Body body: {{ name_pascal }}Dto): {{ name_pascal }}Dto

    @DELETE("{{ name_plural }}/{id}")
    suspend fun delete{{ name_pascal }}(@Path("id") id: Long)
}
"""

_API_REPOSITORY = """\
package {{ package }}.data.repository

import {{ package }}.data.remote.{{ name_pascal }}ApiService
import {{ package }}.data.remote.dto.{{ name_pascal }}Dto
import javax.inject.Inject
import javax.inject.Singleton

@Singleton
class {{ name_pascal }}Repository @Inject constructor(
    private val api: {{ name_pascal }}ApiService,
) {

    suspend fun get{{ name_pascal }}List(): Result<List<{{ name_pascal }}Dto>> =
        runCatching { api.get{{ name_pascal }}List() }

    suspend fun get{{ name_pascal }}(id: Long): Result<{{ name_pascal }}Dto> =
        runCatching { api.get{{ name_pascal }}(id) }
}
"""

API = Template(
    id="api",
    description="Retrofit service interface, DTO and repository",
    files=(
        FileSkeleton(
            path=_MAIN + "/data/remote/dto/{{ name_pascal }}Dto.kt",
            body=_API_DTO,
        ),
        FileSkeleton(
            path=_MAIN + "/data/remote/{{ name_pascal }}ApiService.kt",
            body=_API_SERVICE,
        ),
        FileSkeleton(
            path=_MAIN + "/data/repository/{{ name_pascal }}Repository.kt",
            body=_API_REPOSITORY,
        ),
    ),
    manual_steps=(
        ManualStep(
            text="Provide {{ name_pascal }}ApiService from the Retrofit instance in the DI module",
            convention="di-module-path",
            target="the Hilt module that builds the Retrofit instance",
        ),
        ManualStep(
            text="Add the Retrofit, converter-gson and OkHttp dependencies to app/build.gradle if missing"
        ),
    ),
)


# ---------------------------------------------------------------------------
# entity
# ---------------------------------------------------------------------------

_ENTITY = """\
package {{ package }}.data.local.entity

import androidx.room.ColumnInfo
import androidx.room.Entity
import androidx.room.PrimaryKey

@Entity(tableName = "{{ name_plural }}")
data class {{ name_pascal }}Entity(
    @PrimaryKey(autoGenerate = true) val id: Long = 0,
    @ColumnInfo(name = "name") val name: String,
    @ColumnInfo(name = "created_at") val createdAt: Long = System.currentTimeMillis(),
)
"""

_DAO = """\
package {{ package }}.data.local.dao

import androidx.room.Dao
import androidx.room.Delete
import androidx.room.Insert
import androidx.room.OnConflictStrategy
import androidx.room.Query
import {{ package }}.data.local.entity.{{ name_pascal }}Entity
import kotlinx.coroutines.flow.Flow

@Dao
interface {{ name_pascal }}Dao {

    @Query("SELECT * FROM {{ name_plural }} ORDER BY created_at DESC")
    fun observeAll(): Flow<List<{{ name_pascal }}Entity>>

    @Query("SELECT * FROM {{ name_plural }} WHERE id = :id")
    suspend fun getById(id: Long): {{ name_pascal }}Entity?

    @Insert(onConflict = OnConflictStrategy.REPLACE)
    suspend fun upsert({{ name_camel }}: {{ name_pascal }}Entity): Long

    @Delete
    suspend fun delete({{ name_camel }}: {{ name_pascal }}Entity)
}
"""

ENTITY = Template(
    id="entity",
    description="Room entity and DAO",
    files=(
        FileSkeleton(
            path=_MAIN + "/data/local/entity/{{ name_pascal }}Entity.kt",
            body=_ENTITY,
        ),
        FileSkeleton(
            path=_MAIN + "/data/local/dao/{{ name_pascal }}Dao.kt",
            body=_DAO,
        ),
    ),
    manual_steps=(
        ManualStep(
            text=(
                "Register {{ name_pascal }}Entity in the @Database entities list "
                "and add an abstract {{ name_camel }}Dao() accessor"
            ),
            convention="database-path",
            target="the RoomDatabase definition",
        ),
        ManualStep(
            text="Bump the database version and add a migration creating the {{ name_plural }} table"
        ),
        ManualStep(
            text="Provide {{ name_pascal }}Dao from the database in the DI module",
            convention="di-module-path",
            target="the Hilt module that builds the database",
        ),
    ),
)


# ---------------------------------------------------------------------------
# tests
# ---------------------------------------------------------------------------

_VIEW_MODEL_TEST = """\
package {{ package }}.ui.{{ name_lower }}

import kotlinx.coroutines.Dispatchers
import kotlinx.coroutines.ExperimentalCoroutinesApi
import kotlinx.coroutines.test.StandardTestDispatcher
import kotlinx.coroutines.test.advanceUntilIdle
import kotlinx.coroutines.test.resetMain
import kotlinx.coroutines.test.runTest
import kotlinx.coroutines.test.setMain
import org.junit.After
import org.junit.Assert.assertFalse
import org.junit.Before
import org.junit.Test

@OptIn(ExperimentalCoroutinesApi::class)
class {{ name_pascal }}ViewModelTest {

    private val dispatcher = StandardTestDispatcher()
    private lateinit var viewModel: {{ name_pascal }}ViewModel

    @Before
    fun setUp() {
        Dispatchers.setMain(dispatcher)
        viewModel = {{ name_pascal }}ViewModel()
    }

    @After
    fun tearDown() {
        Dispatchers.resetMain()
    }

    @Test
    fun `load finishes without loading flag`() = runTest {
        viewModel.load()
        advanceUntilIdle()
        assertFalse(viewModel.uiState.value.isLoading)
    }
}
"""

_REPOSITORY_TEST = """\
package {{ package }}.data.repository

import {{ package }}.data.remote.{{ name_pascal }}ApiService
import {{ package }}.data.remote.dto.{{ name_pascal }}Dto
import io.mockk.coEvery
import io.mockk.mockk
import kotlinx.coroutines.test.runTest
import org.junit.Assert.assertEquals
import org.junit.Assert.assertTrue
import org.junit.Test

class {{ name_pascal }}RepositoryTest {

    private val api: {{ name_pascal }}ApiService = mockk()
    private val repository = {{ name_pascal }}Repository(api)

    @Test
    fun `get{{ name_pascal }}List returns api result`() = runTest {
        val expected = listOf({{ name_pascal }}Dto(id = 1, name = "{{ name_camel }}"))
        coEvery { api.get{{ name_pascal }}List() } returns expected

        assertEquals(expected, repository.get{{ name_pascal }}List().getOrThrow())
    }

    @Test
    fun `get{{ name_pascal }}List wraps api failure`() = runTest {
        coEvery { api.get{{ name_pascal }}List() } throws RuntimeException("boom")

        assertTrue(repository.get{{ name_pascal }}List().isFailure)
    }
}
"""

TESTS = Template(
    id="tests",
    description="JUnit tests for the screen ViewModel and API repository",
    files=(
        FileSkeleton(
            path=_TEST + "/ui/{{ name_lower }}/{{ name_pascal }}ViewModelTest.kt",
            body=_VIEW_MODEL_TEST,
        ),
        FileSkeleton(
            path=_TEST + "/data/repository/{{ name_pascal }}RepositoryTest.kt",
            body=_REPOSITORY_TEST,
        ),
    ),
    manual_steps=(
        ManualStep(
            text=(
                "Add testImplementation dependencies for JUnit 4, MockK and "
                "kotlinx-coroutines-test to app/build.gradle if missing"
            )
        ),
    ),
)


BUILTIN_TEMPLATES: tuple[Template, ...] = (SCREEN, API, ENTITY, TESTS)
